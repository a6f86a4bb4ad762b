from __future__ import annotations


class SmartTextError(Exception):
    """Base class for parse pass errors."""


class ConfigurationError(SmartTextError):
    """A descriptor list or interaction config is malformed (a caller bug)."""


class ResolutionError(SmartTextError):
    """A matched span could not be traced back to any descriptor."""

    def __init__(self, matched_text: str) -> None:
        super().__init__(f"no descriptor matches {matched_text!r}")
        self.matched_text = matched_text
