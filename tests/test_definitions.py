"""Tests for definition extraction."""

from extranotes import FootnoteConfig
from extranotes.definitions import extract_definitions
from extranotes.nodes import Reference

CONFIG = FootnoteConfig()


def _refs(*identifiers: str) -> tuple[Reference, ...]:
    return tuple(
        Reference(identifier=ident, index=i, id=f"1:{i}")
        for i, ident in enumerate(identifiers, start=1)
    )


class TestExtractDefinitions:
    def test_single_definition(self) -> None:
        remaining, footnotes = extract_definitions("Text\n[^1]: Body", _refs("1"), CONFIG)
        assert remaining == "Text\n"
        assert len(footnotes) == 1
        assert footnotes[0].body == "Body"
        assert footnotes[0].id == "1:1"

    def test_body_runs_to_next_definition(self) -> None:
        text = "T\n[^1]: first\ncontinued\n\n[^2]: second\nto the end\n"
        _, footnotes = extract_definitions(text, _refs("1", "2"), CONFIG)
        assert [fn.body for fn in footnotes] == ["first\ncontinued", "second\nto the end"]

    def test_definitions_on_one_line(self) -> None:
        _, footnotes = extract_definitions("[^1]: a [^2]: b", _refs("1", "2"), CONFIG)
        assert [fn.body for fn in footnotes] == ["a", "b"]

    def test_ordered_by_index(self) -> None:
        _, footnotes = extract_definitions("[^b]: B\n[^a]: A", _refs("a", "b"), CONFIG)
        assert [fn.identifier for fn in footnotes] == ["a", "b"]

    def test_first_definition_wins(self) -> None:
        remaining, footnotes = extract_definitions(
            "T\n[^1]: first\n[^1]: second", _refs("1"), CONFIG
        )
        assert [fn.body for fn in footnotes] == ["first"]
        assert "second" not in remaining

    def test_orphan_kept(self) -> None:
        remaining, footnotes = extract_definitions("T\n[^9]: orphan", _refs("1"), CONFIG)
        assert remaining == "T\n[^9]: orphan"
        assert footnotes == ()

    def test_orphan_dropped(self) -> None:
        config = FootnoteConfig(keep_orphan_definitions=False)
        remaining, footnotes = extract_definitions("T\n[^9]: orphan", _refs("1"), config)
        assert remaining == "T\n"
        assert footnotes == ()

    def test_body_sanitized(self) -> None:
        _, footnotes = extract_definitions(
            '[^1]: <div class="x"><em>kept</em></div><!-- gone -->', _refs("1"), CONFIG
        )
        assert footnotes[0].body == "<em>kept</em>"

    def test_empty_body(self) -> None:
        _, footnotes = extract_definitions("[^1]:", _refs("1"), CONFIG)
        assert footnotes[0].body == ""
