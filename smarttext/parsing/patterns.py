from __future__ import annotations

import logging
import re

from .errors import ConfigurationError
from .models import MatchText, ParsedType, RegexOptions

log = logging.getLogger(__name__)

EMAIL_PATTERN = r"\b[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9\-]+(?:\.[a-zA-Z0-9\-]+)*\.[a-zA-Z]{2,}\b"

# Optional country code, optional bracketed area code, two digit groups.
PHONE_PATTERN = (
    r"(?<![\w+])"
    r"(?:\+\d{1,3}[\s.\-]?)?"
    r"(?:\(\d{1,4}\)|\d{1,4})[\s.\-]?"
    r"\d{3,4}[\s.\-]?\d{3,4}"
    r"(?!\w)"
)

# Scheme or www. prefix, dotted host, optional port and path.  Trailing
# sentence punctuation is left out of the match.
URL_PATTERN = (
    r"(?:https?://|www\.)"
    r"[\w\-]+(?:\.[\w\-]+)+"
    r"(?::\d+)?"
    r"(?:[/?#](?:[^\s<>\"']*[^\s<>\"'.,;:!?)\]}])?)?"
)

BUILTIN_PATTERNS: dict[ParsedType, str] = {
    ParsedType.EMAIL: EMAIL_PATTERN,
    ParsedType.PHONE: PHONE_PATTERN,
    ParsedType.URL: URL_PATTERN,
}


def pattern_for(descriptor: MatchText) -> str:
    """Return the pattern-source-string *descriptor* is keyed by.

    Raises ConfigurationError if a non built-in descriptor has no pattern.
    An empty string is a valid (if degenerate) pattern.
    """
    builtin = BUILTIN_PATTERNS.get(descriptor.type)
    if builtin is not None:
        return builtin
    if descriptor.pattern is None:
        raise ConfigurationError(
            f"{descriptor.type.value} descriptor requires a pattern"
        )
    return descriptor.pattern


def compile_pattern(pattern: str, options: RegexOptions) -> re.Pattern[str]:
    try:
        return re.compile(pattern, options.flags)
    except (re.error, TypeError) as exc:
        log.debug("Rejected pattern %r: %s", pattern, exc)
        raise ConfigurationError(f"invalid pattern {pattern!r}: {exc}") from exc
