from __future__ import annotations

from .errors import ResolutionError
from .models import MatchText
from .table import DescriptorTable


class DescriptorResolver:
    """Find the descriptor that owns a matched piece of text.

    The compound regex does not say which alternative produced a match,
    so the text is first looked up as a literal table key and otherwise
    re-tested against each pattern in priority order.
    """

    def __init__(self, table: DescriptorTable) -> None:
        self._table = table

    def resolve(self, matched_text: str) -> tuple[str, MatchText]:
        """Return ``(pattern, descriptor)`` for *matched_text*.

        Raises ResolutionError when no registered pattern matches the
        text on its own (e.g. a pattern that depends on lookbehind
        context outside the match).
        """
        descriptor = self._table.get(matched_text)
        if descriptor is not None:
            return matched_text, descriptor
        for key, descriptor in self._table.items():
            if self._table.compiled(key).search(matched_text):
                return key, descriptor
        raise ResolutionError(matched_text)
