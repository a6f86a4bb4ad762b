from __future__ import annotations

from .errors import ConfigurationError, ResolutionError, SmartTextError
from .models import (
    AnnotatedSegment,
    LiteralSegment,
    MatchSpan,
    MatchText,
    ParsedType,
    RegexOptions,
    Segment,
    SocialPlatform,
    TextInteractions,
)
from .parser import SmartTextParser, parse_text

__all__ = [
    "AnnotatedSegment",
    "ConfigurationError",
    "LiteralSegment",
    "MatchSpan",
    "MatchText",
    "ParsedType",
    "RegexOptions",
    "ResolutionError",
    "Segment",
    "SmartTextError",
    "SmartTextParser",
    "SocialPlatform",
    "TextInteractions",
    "parse_text",
]
