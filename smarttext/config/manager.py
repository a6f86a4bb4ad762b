from __future__ import annotations

import copy
import dataclasses
import os
import tomllib
from pathlib import Path

from smarttext.config.defaults import (
    DEFAULT_CONFIG,
    descriptors_from_config,
    interactions_from_config,
    regex_options_from_config,
)
from smarttext.parsing.errors import ConfigurationError
from smarttext.parsing.parser import SmartTextParser


class ConfigManager:
    def __init__(self, config_path: str | None = None) -> None:
        if config_path is not None:
            self._config_path = Path(config_path).expanduser()
        else:
            xdg = os.environ.get("XDG_CONFIG_HOME", "~/.config")
            self._config_path = Path(xdg).expanduser() / "smarttext" / "config.toml"
        self._config: dict = {}

    @property
    def path(self) -> Path:
        return self._config_path

    @property
    def config(self) -> dict:
        if not self._config:
            self._config = self.load()
        return self._config

    def load(self) -> dict:
        defaults = copy.deepcopy(DEFAULT_CONFIG)
        if not self._config_path.exists():
            self.save(defaults)
            self._config = defaults
            return defaults

        try:
            with open(self._config_path, "rb") as f:
                user_config = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"{self._config_path}: {exc}") from exc

        merged = self._deep_merge(defaults, user_config)
        # A user [patterns] table replaces the default descriptor list
        # rather than merging into it, so the file fully controls order.
        if "patterns" in user_config:
            merged["patterns"] = user_config["patterns"]
        self._config = merged
        return merged

    def _deep_merge(self, base: dict, override: dict) -> dict:
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def save(self, config: dict) -> None:
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        toml_str = self._dict_to_toml(config)
        with open(self._config_path, "w") as f:
            f.write(toml_str)

    def get(self, key_path: str, default: object = None) -> object:
        keys = key_path.split(".")
        current: object = self.config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    def build_parser(self, ignore_case: bool = False) -> SmartTextParser:
        """Parser for the configured descriptors, options and defaults."""
        options = regex_options_from_config(self.config)
        if ignore_case:
            options = dataclasses.replace(options, case_sensitive=False)
        return SmartTextParser(
            descriptors_from_config(self.config),
            regex_options=options,
            default_style=self.get("style.default") or None,
            default_interactions=interactions_from_config(self.config),
        )

    # ------------------------------------------------------------------
    # Minimal TOML serializer (no tomli_w dependency)
    # ------------------------------------------------------------------

    def _dict_to_toml(self, d: dict, prefix: str = "") -> str:
        lines: list[str] = []
        tables: list[tuple[str, dict]] = []

        for key, value in d.items():
            full_key = f"{prefix}.{key}" if prefix else key
            if isinstance(value, dict):
                tables.append((full_key, value))
            else:
                lines.append(f"{key} = {self._toml_value(value)}")

        result = "\n".join(lines)
        for full_key, table in tables:
            section = self._dict_to_toml(table, prefix=full_key)
            result += f"\n[{full_key}]\n" + section

        return result

    @staticmethod
    def _toml_value(value: object) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        if isinstance(value, list):
            items = ", ".join(ConfigManager._toml_value(item) for item in value)
            return f"[{items}]"
        return str(value)
