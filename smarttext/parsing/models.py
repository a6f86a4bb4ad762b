from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping

from .errors import ConfigurationError

# Styles are owned by the renderer (rich style strings or Style objects).
StyleType = Any

RenderText = Callable[..., Mapping[str, str]]
RenderWidget = Callable[..., Any]


class ParsedType(Enum):
    """Kind of text a descriptor matches."""

    EMAIL = "email"
    PHONE = "phone"
    URL = "url"
    CUSTOM = "custom"
    COPYABLE = "copyable"
    SHAREABLE = "shareable"


class SocialPlatform(Enum):
    TWITTER = "twitter"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"
    OTHER = "other"


@dataclass(frozen=True)
class TextInteractions:
    """Copy/share/profile capabilities attached to matched text.

    Icons are opaque to the parser; only their presence and
    ``icons_at_start`` are carried through to the renderer.
    """

    enable_copy: bool = False
    enable_share: bool = False
    enable_social_profile: bool = False
    platform: SocialPlatform | None = None
    username: str | None = None
    copy_icon: Any = None
    share_icon: Any = None
    social_icon: Any = None
    show_icons: bool = True
    icons_at_start: bool = False

    def __post_init__(self) -> None:
        if self.enable_social_profile and (
            self.platform is None or not self.username
        ):
            raise ConfigurationError(
                "enable_social_profile requires both platform and username"
            )

    @property
    def has_profile(self) -> bool:
        return (
            self.enable_social_profile
            and self.platform is not None
            and bool(self.username)
        )


@dataclass(frozen=True)
class MatchText:
    """Descriptor: what to match and how its matches are presented.

    Built-in types (email, phone, url) are keyed by their constant
    pattern; every other type is keyed by ``pattern``.
    """

    type: ParsedType = ParsedType.CUSTOM
    pattern: str | None = None
    style: StyleType = None
    on_tap: Callable[[str], Any] | None = None
    render_text: RenderText | None = None
    render_widget: RenderWidget | None = None
    interactions: TextInteractions | None = None


@dataclass(frozen=True)
class RegexOptions:
    """Flags applied uniformly to every pattern of one parse pass."""

    multiline: bool = False
    case_sensitive: bool = True
    dot_all: bool = False
    unicode: bool = False

    @property
    def flags(self) -> int:
        flags = 0
        if self.multiline:
            flags |= re.MULTILINE
        if not self.case_sensitive:
            flags |= re.IGNORECASE
        if self.dot_all:
            flags |= re.DOTALL
        if not self.unicode:
            flags |= re.ASCII
        return flags


@dataclass(frozen=True, slots=True)
class MatchSpan:
    start: int
    text: str
    matched: bool

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True, slots=True)
class LiteralSegment:
    text: str
    style: StyleType = None

    @property
    def raw_text(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class AnnotatedSegment:
    """A matched run with its resolved descriptor and metadata."""

    text: str
    descriptor: MatchText
    pattern: str
    raw_text: str
    tap_value: str
    style: StyleType = None
    interactions: TextInteractions | None = None

    @property
    def profile(self) -> tuple[SocialPlatform, str] | None:
        """(platform, username) when tapping opens a social profile."""
        interactions = self.interactions
        if interactions is None or not interactions.enable_social_profile:
            return None
        if interactions.platform is None or not interactions.username:
            return None
        return interactions.platform, interactions.username


Segment = LiteralSegment | AnnotatedSegment
