"""Typed records for references and footnotes.

All records are frozen dataclasses with slots, created by a single
add_footnotes() call and immutable afterwards.

Anchor ids:
    per-call numbering   "<batch>:<index>"   e.g. fnref2:1 / fn2:1
    continuous numbering "<index>"           e.g. fnref7 / fn7

Thread Safety:
All records are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from typing import Any


def make_id(index: int, batch: int, *, continuous: bool) -> str:
    """Build the anchor id shared by a reference and its endnote."""
    if continuous:
        return str(index)
    return f"{batch}:{index}"


@dataclass(frozen=True, slots=True)
class Reference:
    """Confirmed footnote reference.

    Markdown: [^1]
    HTML: <sup id="fnref1:1" class="footnote-ref"><a href="#fn1:1" ...>1</a></sup>

    """

    identifier: str
    index: int
    id: str

    @property
    def raw(self) -> str:
        """Marker text as written in the source."""
        return f"[^{self.identifier}]"


@dataclass(frozen=True, slots=True)
class Footnote:
    """Resolved footnote: a reference together with its sanitized definition.

    Markdown: [^1]: Footnote content here.
    HTML: <li id="fn1:1" role="doc-endnote">Footnote content here. <a ...></a></li>

    """

    identifier: str
    index: int
    id: str
    body: str

    @property
    def batch(self) -> str | None:
        """Batch part of the id, or None for continuous ids."""
        batch, sep, _ = self.id.partition(":")
        return batch if sep else None


@dataclass(frozen=True, slots=True)
class FootnoteResult:
    """Structured output of add_footnotes() with output_as_array enabled.

    text holds the linked text without definitions and without endnote
    markup; footnotes are ordered by ascending index.

    """

    text: str
    footnotes: tuple[Footnote, ...] = ()


def to_dict(footnote: Footnote) -> dict[str, Any]:
    """Convert a Footnote to a JSON-compatible dict."""
    return {
        "identifier": footnote.identifier,
        "index": footnote.index,
        "id": footnote.id,
        "body": footnote.body,
    }


def from_dict(data: dict[str, Any]) -> Footnote:
    """Rebuild a Footnote from to_dict() output."""
    return Footnote(
        identifier=str(data["identifier"]),
        index=int(data["index"]),
        id=str(data["id"]),
        body=str(data["body"]),
    )
