"""Property-based tests for add_footnotes() using Hypothesis.

These tests verify invariants that should hold for any input:
1. The transform never raises on text
2. Text without footnote markers is returned unchanged
3. Numbering is sequential and every confirmed reference gets one endnote
"""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from extranotes import FootnoteConfig, FootnoteCounters, FootnoteResult, add_footnotes

# Alphabet rich in the characters the grammar cares about
marker_text = st.text(alphabet="[]^:ab12 \n\r<>/!-em", max_size=80)
identifiers = st.lists(
    st.from_regex(r"[a-z0-9_]{1,6}", fullmatch=True), min_size=1, max_size=8, unique=True
)


class TestTransformProperties:
    @given(text=marker_text)
    @settings(max_examples=200)
    def test_never_raises(self, text: str) -> None:
        assert isinstance(add_footnotes(text), str)

    @given(text=marker_text, continuous=st.booleans())
    @settings(max_examples=100)
    def test_array_mode_never_raises(self, text: str, continuous: bool) -> None:
        config = FootnoteConfig(output_as_array=True, continuous=continuous)
        result = add_footnotes(text, config)
        assert isinstance(result, FootnoteResult)

    @given(text=st.text(max_size=200))
    def test_without_markers_unchanged(self, text: str) -> None:
        assume("[^" not in text)
        assert add_footnotes(text) == text

    @given(ids=identifiers)
    @settings(max_examples=50)
    def test_one_endnote_per_reference(self, ids: list[str]) -> None:
        body = " ".join(f"w[^{ident}]" for ident in ids)
        defs = "\n".join(f"[^{ident}]: note {ident}" for ident in ids)
        result = add_footnotes(f"{body}\n{defs}", FootnoteConfig(output_as_array=True))
        assert isinstance(result, FootnoteResult)
        assert [fn.identifier for fn in result.footnotes] == ids
        assert [fn.index for fn in result.footnotes] == list(range(1, len(ids) + 1))
        assert [fn.body for fn in result.footnotes] == [f"note {ident}" for ident in ids]

    @given(sizes=st.lists(st.integers(min_value=1, max_value=4), min_size=1, max_size=5))
    @settings(max_examples=50)
    def test_continuous_numbering_carries_over(self, sizes: list[int]) -> None:
        counters = FootnoteCounters()
        config = FootnoteConfig(continuous=True, output_as_array=True)
        seen: list[int] = []
        for size in sizes:
            text = " ".join(f"x[^{i}]" for i in range(size)) + "\n"
            text += "\n".join(f"[^{i}]: n{i}" for i in range(size))
            result = add_footnotes(text, config, counters=counters)
            assert isinstance(result, FootnoteResult)
            seen.extend(fn.index for fn in result.footnotes)
        assert seen == list(range(1, sum(sizes) + 1))
        assert counters.snapshot() == (sum(sizes) + 1, len(sizes) + 1)
