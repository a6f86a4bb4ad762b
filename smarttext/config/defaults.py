from __future__ import annotations

import logging
from typing import Any

from smarttext.parsing.errors import ConfigurationError
from smarttext.parsing.models import (
    MatchText,
    ParsedType,
    RegexOptions,
    SocialPlatform,
    TextInteractions,
)

log = logging.getLogger(__name__)


def regex_options_from_config(config: dict) -> RegexOptions:
    regex_cfg = config.get("regex", {})
    return RegexOptions(
        multiline=bool(regex_cfg.get("multiline", False)),
        case_sensitive=bool(regex_cfg.get("case_sensitive", True)),
        dot_all=bool(regex_cfg.get("dot_all", False)),
        unicode=bool(regex_cfg.get("unicode", False)),
    )


def _interactions(cfg: dict[str, Any]) -> TextInteractions | None:
    platform_name = cfg.get("platform", "")
    username = cfg.get("username", "")
    wants_profile = bool(platform_name or username)
    if not (cfg.get("copy") or cfg.get("share") or wants_profile):
        return None
    platform: SocialPlatform | None = None
    if platform_name:
        try:
            platform = SocialPlatform(platform_name)
        except ValueError:
            raise ConfigurationError(
                f"unknown social platform {platform_name!r}"
            ) from None
    return TextInteractions(
        enable_copy=bool(cfg.get("copy", False)),
        enable_share=bool(cfg.get("share", False)),
        enable_social_profile=wants_profile,
        platform=platform,
        username=username or None,
        copy_icon=cfg.get("copy_icon") or None,
        share_icon=cfg.get("share_icon") or None,
        social_icon=cfg.get("social_icon") or None,
        show_icons=bool(cfg.get("show_icons", True)),
        icons_at_start=bool(cfg.get("icons_at_start", False)),
    )


def interactions_from_config(config: dict) -> TextInteractions | None:
    """Default interactions, or None unless ``interactions.enabled`` is set."""
    cfg = config.get("interactions", {})
    if not cfg.get("enabled", False):
        return None
    return _interactions(cfg)


def descriptors_from_config(config: dict) -> list[MatchText]:
    """Build descriptors from the ``[patterns.<name>]`` tables, in file order."""
    result: list[MatchText] = []
    for name, cfg in config.get("patterns", {}).items():
        if not isinstance(cfg, dict):
            log.warning("Ignoring pattern %r: not a table", name)
            continue
        type_name = cfg.get("type", "custom")
        try:
            parsed_type = ParsedType(type_name)
        except ValueError:
            raise ConfigurationError(
                f"pattern {name!r} has unknown type {type_name!r}"
            ) from None
        pattern = cfg.get("pattern")
        if pattern is not None and not isinstance(pattern, str):
            raise ConfigurationError(f"pattern {name!r}: pattern must be a string")
        style = cfg.get("style")
        if style is not None and not isinstance(style, str):
            raise ConfigurationError(f"pattern {name!r}: style must be a string")
        result.append(
            MatchText(
                type=parsed_type,
                pattern=pattern,
                style=style or None,
                interactions=_interactions(cfg),
            )
        )
    return result


DEFAULT_CONFIG: dict = {
    "general": {
        "log_file": "",
        "log_level": "INFO",
    },
    "regex": {
        "multiline": False,
        "case_sensitive": True,
        "dot_all": False,
        "unicode": False,
    },
    "style": {
        "default": "",
    },
    "interactions": {
        "enabled": False,
        "copy": True,
        "share": False,
        "show_icons": True,
        "icons_at_start": False,
    },
    "patterns": {
        "email": {
            "type": "email",
            "style": "underline blue",
            "copy": True,
        },
        "phone": {
            "type": "phone",
            "style": "underline green",
            "copy": True,
            "share": True,
        },
        "url": {
            "type": "url",
            "style": "underline magenta",
            "copy": True,
        },
        "mention": {
            "type": "custom",
            "pattern": r"@\w+",
            "style": "bold cyan",
        },
    },
}
