from __future__ import annotations

import pytest

from smarttext.parsing.errors import ConfigurationError
from smarttext.parsing.matcher import CompoundMatcher, compound_pattern
from smarttext.parsing.models import MatchSpan, MatchText, ParsedType, RegexOptions
from smarttext.parsing.table import DescriptorTable


def _matcher(*patterns: str, options: RegexOptions | None = None) -> CompoundMatcher:
    return CompoundMatcher(
        DescriptorTable([MatchText(pattern=p) for p in patterns], options)
    )


def _assert_partition(text: str, spans: list[MatchSpan]) -> None:
    assert "".join(s.text for s in spans) == text
    pos = 0
    for span in spans:
        assert span.start == pos
        pos = span.end
    assert pos == len(text)


def test_compound_pattern_is_one_alternation_group() -> None:
    assert compound_pattern(["a", "b+", "c"]) == "(a|b+|c)"


def test_no_descriptors_single_literal_span() -> None:
    matcher = CompoundMatcher(DescriptorTable([]))
    assert matcher.pattern is None
    assert matcher.scan("hello world") == [MatchSpan(0, "hello world", matched=False)]


def test_no_descriptors_empty_text() -> None:
    matcher = CompoundMatcher(DescriptorTable([]))
    assert matcher.scan("") == [MatchSpan(0, "", matched=False)]


def test_empty_text_with_descriptors() -> None:
    assert _matcher("x").scan("") == [MatchSpan(0, "", matched=False)]


def test_email_split_point() -> None:
    matcher = CompoundMatcher(DescriptorTable([MatchText(type=ParsedType.EMAIL)]))
    assert matcher.scan("Contact a@b.com") == [
        MatchSpan(0, "Contact ", matched=False),
        MatchSpan(8, "a@b.com", matched=True),
    ]


def test_adjacent_matches_have_no_empty_literal() -> None:
    spans = _matcher("ab").scan("abab")
    assert spans == [MatchSpan(0, "ab", True), MatchSpan(2, "ab", True)]


def test_leftmost_match_wins_over_registration_order() -> None:
    spans = _matcher("world", "hello").scan("hello world")
    assert [s.text for s in spans if s.matched] == ["hello", "world"]


def test_first_alternative_wins_not_longest() -> None:
    spans = _matcher("ab", "abc").scan("abc")
    assert spans == [MatchSpan(0, "ab", True), MatchSpan(2, "c", False)]


def test_longer_alternative_first_wins() -> None:
    spans = _matcher("abc", "ab").scan("abc")
    assert spans == [MatchSpan(0, "abc", True)]


# ── Zero-width guard ──────────────────────────────────────────────


def test_empty_pattern_terminates_without_duplication() -> None:
    spans = _matcher("").scan("abc")
    assert spans == [MatchSpan(0, "abc", matched=False)]


def test_empty_pattern_alternative_shadows_later_patterns() -> None:
    # "" is tried first at every position and always succeeds.
    spans = _matcher("", "@bob").scan("ping @bob")
    assert spans == [MatchSpan(0, "ping @bob", matched=False)]


def test_optional_pattern_emits_only_non_empty_matches() -> None:
    spans = _matcher("x*").scan("axxb")
    assert spans == [
        MatchSpan(0, "a", False),
        MatchSpan(1, "xx", True),
        MatchSpan(3, "b", False),
    ]


def test_lookahead_only_pattern() -> None:
    text = "one two"
    spans = _matcher(r"(?=t)").scan(text)
    assert spans == [MatchSpan(0, text, matched=False)]


# ── Options ───────────────────────────────────────────────────────


def test_case_insensitive_option() -> None:
    spans = _matcher("hello", options=RegexOptions(case_sensitive=False)).scan("say HELLO")
    assert spans[-1] == MatchSpan(4, "HELLO", matched=True)


def test_case_sensitive_by_default() -> None:
    spans = _matcher("hello").scan("say HELLO")
    assert spans == [MatchSpan(0, "say HELLO", matched=False)]


def test_multiline_anchor() -> None:
    text = "first\nsecond"
    assert [s.text for s in _matcher("^s\\w+").scan(text) if s.matched] == []
    multi = _matcher("^s\\w+", options=RegexOptions(multiline=True)).scan(text)
    assert [s.text for s in multi if s.matched] == ["second"]


def test_dot_all_option() -> None:
    text = "<a\nb>"
    assert not any(s.matched for s in _matcher("<.+>").scan(text))
    spans = _matcher("<.+>", options=RegexOptions(dot_all=True)).scan(text)
    assert spans == [MatchSpan(0, text, matched=True)]


# ── Combination errors ────────────────────────────────────────────


def test_reused_group_name_fails_when_combined() -> None:
    table = DescriptorTable(
        [MatchText(pattern=r"(?P<n>\d+)"), MatchText(pattern=r"(?P<n>[a-z]+)")]
    )
    with pytest.raises(ConfigurationError):
        CompoundMatcher(table)


# ── Lossless partition ────────────────────────────────────────────


@pytest.mark.parametrize(
    "text",
    [
        "",
        "plain text only",
        "Mail a@b.com or call 555-123-4567, see https://x.io/a.",
        "@alice@bob a@b.com@carol",
        "\n\nmulti\nline a@b.com\n",
        "unicode ✓ café @bob 👋",
    ],
)
@pytest.mark.parametrize(
    "descriptors",
    [
        [],
        [MatchText(type=ParsedType.EMAIL)],
        [MatchText(type=ParsedType.EMAIL), MatchText(type=ParsedType.PHONE), MatchText(type=ParsedType.URL)],
        [MatchText(pattern=r"@\w+"), MatchText(type=ParsedType.EMAIL)],
        [MatchText(pattern=""), MatchText(pattern=r"\w*")],
    ],
)
def test_spans_partition_input(text: str, descriptors: list[MatchText]) -> None:
    spans = CompoundMatcher(DescriptorTable(descriptors)).scan(text)
    _assert_partition(text, spans)
    assert all(s.text for s in spans) or spans == [MatchSpan(0, "", False)]
