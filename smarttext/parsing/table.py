from __future__ import annotations

import logging
import re
from typing import Iterable

from .models import MatchText, RegexOptions
from .patterns import compile_pattern, pattern_for

log = logging.getLogger(__name__)


class DescriptorTable:
    """Ordered mapping of pattern-source-string -> descriptor.

    Insertion order is the caller's priority order.  A descriptor whose
    pattern string is already present replaces the earlier descriptor but
    keeps the earlier position (last write wins).  Every pattern is
    compiled eagerly so malformed regexes fail before any scanning.
    """

    def __init__(
        self,
        descriptors: Iterable[MatchText],
        options: RegexOptions | None = None,
    ) -> None:
        self.options = options or RegexOptions()
        self._entries: dict[str, MatchText] = {}
        self._compiled: dict[str, re.Pattern[str]] = {}
        for descriptor in descriptors:
            key = pattern_for(descriptor)
            if key in self._entries:
                log.debug("Descriptor for %r overrides an earlier one", key)
            else:
                self._compiled[key] = compile_pattern(key, self.options)
            self._entries[key] = descriptor

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __getitem__(self, key: str) -> MatchText:
        return self._entries[key]

    def get(self, key: str) -> MatchText | None:
        return self._entries.get(key)

    def keys(self) -> list[str]:
        return list(self._entries)

    def items(self) -> list[tuple[str, MatchText]]:
        return list(self._entries.items())

    def compiled(self, key: str) -> re.Pattern[str]:
        return self._compiled[key]


def build_descriptor_table(
    descriptors: Iterable[MatchText], options: RegexOptions | None = None
) -> DescriptorTable:
    return DescriptorTable(descriptors, options)
