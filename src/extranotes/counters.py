"""Render-scoped footnote counters.

Two integers carry state between calls that belong to one logical render
(one page made of several text fields):

- footnote_index: next number handed out in continuous mode
- footnotes_id: batch id of the next call, used to keep anchors unique and
  to group endnote lists when numbering restarts per call

Counters live on an explicit FootnoteCounters object. Pass one to
add_footnotes() directly, or open a render scope so every call inside the
block shares the same instance.

Example:
    from extranotes import add_footnotes
    from extranotes.counters import footnote_render

    with footnote_render() as counters:
        body = add_footnotes(page.body)
        aside = add_footnotes(page.aside)

    print(counters.snapshot())
    # (1, 3)

Thread Safety:
    The current render scope is held in a ContextVar, so concurrent renders
    on separate threads never share counters unless a caller passes the same
    instance to both.

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass


@dataclass(slots=True)
class FootnoteCounters:
    """Mutable numbering state for one render.

    Attributes:
        footnote_index: Next footnote number in continuous mode.
        footnotes_id: Batch id of the next add_footnotes() call.

    """

    footnote_index: int = 1
    footnotes_id: int = 1

    def advance(self, count: int, *, continuous: bool) -> None:
        """Record one finished call that produced count footnotes.

        The batch id always moves on by one. In continuous mode the footnote
        index carries over to the next call; otherwise it goes back to 1.
        """
        if continuous:
            self.footnote_index += count
        else:
            self.footnote_index = 1
        self.footnotes_id += 1

    def snapshot(self) -> tuple[int, int]:
        """Return (footnote_index, footnotes_id)."""
        return (self.footnote_index, self.footnotes_id)

    def reset(self) -> None:
        """Start numbering over, as for a new render."""
        self.footnote_index = 1
        self.footnotes_id = 1


_render_counters: ContextVar[FootnoteCounters | None] = ContextVar(
    "footnote_render_counters",
    default=None,
)


def get_render_counters() -> FootnoteCounters | None:
    """Get the counters of the current render scope (None outside one)."""
    return _render_counters.get()


@contextmanager
def footnote_render(counters: FootnoteCounters | None = None) -> Iterator[FootnoteCounters]:
    """Context manager scoping counters to one logical render.

    Args:
        counters: Existing counters to resume; a fresh instance when None.

    Yields:
        The FootnoteCounters shared by every add_footnotes() call in the block.

    """
    active = counters if counters is not None else FootnoteCounters()
    token: Token[FootnoteCounters | None] = _render_counters.set(active)
    try:
        yield active
    finally:
        _render_counters.reset(token)


def resolve_counters(counters: FootnoteCounters | None = None) -> FootnoteCounters:
    """Pick the counters for a call: explicit, then render scope, then fresh."""
    if counters is not None:
        return counters
    scoped = _render_counters.get()
    if scoped is not None:
        return scoped
    return FootnoteCounters()


__all__ = [
    "FootnoteCounters",
    "footnote_render",
    "get_render_counters",
    "resolve_counters",
]
