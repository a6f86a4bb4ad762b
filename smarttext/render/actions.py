from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Protocol

from smarttext.parsing.models import AnnotatedSegment, Segment, SocialPlatform

log = logging.getLogger(__name__)


class Affordance(Enum):
    COPY = "copy"
    SHARE = "share"
    PROFILE = "profile"


class InteractionHost(Protocol):
    """Platform capabilities the parser never calls itself."""

    def copy(self, text: str) -> Any: ...

    def share(self, text: str) -> Any: ...

    def open_profile(self, platform: SocialPlatform, username: str) -> Any: ...


def affordances(segment: Segment) -> list[Affordance]:
    """Enabled affordances of *segment*, in display order."""
    if not isinstance(segment, AnnotatedSegment) or segment.interactions is None:
        return []
    interactions = segment.interactions
    result: list[Affordance] = []
    if interactions.enable_copy:
        result.append(Affordance.COPY)
    if interactions.enable_share:
        result.append(Affordance.SHARE)
    if interactions.has_profile:
        result.append(Affordance.PROFILE)
    return result


def activate(segment: Segment, host: InteractionHost) -> Any:
    """Handle a tap on *segment*.

    A segment with a social profile opens it; otherwise the descriptor's
    tap callback receives the tap value.  Literal segments are inert.
    """
    if not isinstance(segment, AnnotatedSegment):
        return None
    profile = segment.profile
    if profile is not None:
        platform, username = profile
        log.debug("Opening %s profile %s", platform.value, username)
        return host.open_profile(platform, username)
    if segment.descriptor.on_tap is None:
        return None
    return segment.descriptor.on_tap(segment.tap_value)


def perform(segment: Segment, affordance: Affordance, host: InteractionHost) -> Any:
    """Trigger one affordance button of *segment*."""
    if not isinstance(segment, AnnotatedSegment) or affordance not in affordances(segment):
        log.debug("Affordance %s not enabled for %r", affordance.value, segment.text)
        return None
    if affordance is Affordance.COPY:
        return host.copy(segment.text)
    if affordance is Affordance.SHARE:
        return host.share(segment.text)
    profile = segment.profile
    if profile is None:
        return None
    return host.open_profile(*profile)
