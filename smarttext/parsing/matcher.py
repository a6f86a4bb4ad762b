from __future__ import annotations

import logging
import re

from .errors import ConfigurationError
from .models import MatchSpan
from .table import DescriptorTable

log = logging.getLogger(__name__)


def compound_pattern(keys: list[str]) -> str:
    """Join pattern strings into one alternation group ``(p1|p2|...)``."""
    return "(" + "|".join(keys) + ")"


class CompoundMatcher:
    """Single-pass scanner over the union of every registered pattern.

    The regex engine's alternation precedence decides between patterns
    that match at the same position: the first listed alternative that
    succeeds wins, not the longest match.
    """

    def __init__(self, table: DescriptorTable) -> None:
        self._table = table
        self.pattern: str | None = None
        self._regex: re.Pattern[str] | None = None
        if len(table) == 0:
            return
        self.pattern = compound_pattern(table.keys())
        try:
            self._regex = re.compile(self.pattern, table.options.flags)
        except re.error as exc:
            # Patterns valid on their own can still clash once joined,
            # e.g. a named group reused or an inline flag not at the start.
            raise ConfigurationError(
                f"patterns cannot be combined: {exc}"
            ) from exc

    def scan(self, text: str) -> list[MatchSpan]:
        """Split *text* into literal and matched spans.

        The spans are in input order and their texts concatenate back to
        *text*.  Zero-width matches are not emitted; the scan steps one
        character past them and the character stays in the literal run.
        """
        if self._regex is None:
            return [MatchSpan(0, text, matched=False)]

        spans: list[MatchSpan] = []
        literal_start = 0
        pos = 0
        length = len(text)
        while pos <= length:
            m = self._regex.search(text, pos)
            if m is None:
                break
            start, end = m.span()
            if start == end:
                pos = start + 1
                continue
            if start > literal_start:
                spans.append(
                    MatchSpan(literal_start, text[literal_start:start], matched=False)
                )
            spans.append(MatchSpan(start, m.group(), matched=True))
            literal_start = pos = end

        if literal_start < length or not spans:
            spans.append(MatchSpan(literal_start, text[literal_start:], matched=False))
        return spans
