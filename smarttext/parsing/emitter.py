from __future__ import annotations

import logging

from .errors import ResolutionError
from .models import (
    AnnotatedSegment,
    LiteralSegment,
    MatchSpan,
    Segment,
    StyleType,
    TextInteractions,
)
from .resolver import DescriptorResolver

log = logging.getLogger(__name__)


class SegmentEmitter:
    """Turn scanned spans into render-ready segments."""

    def __init__(
        self,
        resolver: DescriptorResolver,
        default_style: StyleType = None,
        default_interactions: TextInteractions | None = None,
    ) -> None:
        self._resolver = resolver
        self.default_style = default_style
        self.default_interactions = default_interactions

    def emit(self, spans: list[MatchSpan]) -> list[Segment]:
        return [self.emit_span(span) for span in spans]

    def emit_span(self, span: MatchSpan) -> Segment:
        if not span.matched:
            return LiteralSegment(span.text, self.default_style)
        try:
            pattern, descriptor = self._resolver.resolve(span.text)
        except ResolutionError:
            log.warning(
                "Unresolvable match %r at offset %d, rendering as plain text",
                span.text, span.start,
            )
            return LiteralSegment(span.text, self.default_style)

        display = span.text
        value = span.text
        if descriptor.render_text is not None:
            result = descriptor.render_text(text=span.text, pattern=pattern)
            if result.get("display") is not None:
                display = result["display"]
            if result.get("value") is not None:
                value = result["value"]

        return AnnotatedSegment(
            text=display,
            descriptor=descriptor,
            pattern=pattern,
            raw_text=span.text,
            tap_value=value,
            style=descriptor.style if descriptor.style is not None else self.default_style,
            interactions=descriptor.interactions or self.default_interactions,
        )
