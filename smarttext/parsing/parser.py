from __future__ import annotations

import logging
from typing import Iterable

from .emitter import SegmentEmitter
from .matcher import CompoundMatcher
from .models import MatchSpan, MatchText, RegexOptions, Segment, StyleType, TextInteractions
from .resolver import DescriptorResolver
from .table import DescriptorTable

log = logging.getLogger(__name__)


class SmartTextParser:
    """Descriptor table and compound regex built once, reusable per text.

    Nothing is mutated after construction, so one parser may be shared
    between threads.
    """

    def __init__(
        self,
        descriptors: Iterable[MatchText],
        regex_options: RegexOptions | None = None,
        default_style: StyleType = None,
        default_interactions: TextInteractions | None = None,
    ) -> None:
        self.regex_options = regex_options or RegexOptions()
        self.table = DescriptorTable(descriptors, self.regex_options)
        self.matcher = CompoundMatcher(self.table)
        self.emitter = SegmentEmitter(
            DescriptorResolver(self.table),
            default_style=default_style,
            default_interactions=default_interactions,
        )
        log.debug(
            "Built parser with %d pattern(s): %s", len(self.table), self.matcher.pattern
        )

    def spans(self, text: str) -> list[MatchSpan]:
        return self.matcher.scan(text)

    def parse(self, text: str) -> list[Segment]:
        return self.emitter.emit(self.matcher.scan(text))


def parse_text(
    text: str,
    descriptors: Iterable[MatchText],
    *,
    regex_options: RegexOptions | None = None,
    default_style: StyleType = None,
    default_interactions: TextInteractions | None = None,
) -> list[Segment]:
    """Parse *text* with a descriptor table built for this call only."""
    parser = SmartTextParser(
        descriptors,
        regex_options=regex_options,
        default_style=default_style,
        default_interactions=default_interactions,
    )
    return parser.parse(text)
