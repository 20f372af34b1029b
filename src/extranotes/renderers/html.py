"""HTML renderer for endnotes.

Renders resolved footnotes into the endnotes block appended after the text:

    <div class="footnotes" role="doc-endnotes"><ol>
    <li id="fn1:1" role="doc-endnote">Body <a href="#fnref1:1"
        class="footnote-backref" role="doc-backlink">&#8617;</a></li>
    </ol></div>

(wrapped here for readability; the real output has no whitespace unless
``pretty`` is set.)

List grouping:
- Per-call numbering: one ``<ol>`` per run of consecutive footnotes from
  the same batch, in encounter order, so numbering restarts visibly.
- Continuous numbering: a single ``<ol start="N">`` where N is the first
  footnote's number, so the list continues where a previous call left off.

Thread Safety:
render_footnotes() is a pure function; each call builds its own StringBuilder.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from itertools import groupby
from operator import attrgetter
from typing import TYPE_CHECKING, Any

from extranotes.config import coerce_config
from extranotes.stringbuilder import StringBuilder
from extranotes.utils.text import escape_html

if TYPE_CHECKING:
    from extranotes.config import FootnoteConfig
    from extranotes.nodes import Footnote


def _group_footnotes(footnotes: list[Footnote], continuous: bool) -> list[list[Footnote]]:
    if continuous:
        return [footnotes]
    return [list(group) for _, group in groupby(footnotes, key=attrgetter("batch"))]


def _render_item(sb: StringBuilder, footnote: Footnote, config: FootnoteConfig) -> None:
    pretty = config.pretty
    if pretty:
        sb.append("\n\t\t")
    sb.append(f'<li id="fn{footnote.id}" role="doc-endnote">')
    if pretty:
        sb.append("\n\t\t\t")
    sb.append(
        f'{footnote.body} <a href="#fnref{footnote.id}" '
        f'class="{escape_html(config.backref_class)}" role="doc-backlink">{config.icon}</a>'
    )
    if pretty:
        sb.append("\n\t\t")
    sb.append("</li>")


def render_footnotes(
    footnotes: Iterable[Footnote],
    config: FootnoteConfig | Mapping[str, Any] | None = None,
) -> str:
    """Render footnotes as the endnotes block.

    Args:
        footnotes: Footnotes in display order (as returned by add_footnotes
            in array mode, possibly collected over several calls)
        config: FootnoteConfig or option mapping; the context default if None

    Returns:
        Endnotes markup, or "" when there are no footnotes.
    """
    items = list(footnotes)
    if not items:
        return ""

    config = coerce_config(config)
    pretty = config.pretty

    sb = StringBuilder()
    sb.append(
        f'<{config.tag} class="{escape_html(config.wrapper_class)}" role="doc-endnotes">'
    )
    for group in _group_footnotes(items, config.continuous):
        if pretty:
            sb.append("\n\t")
        if config.continuous:
            sb.append(f'<ol start="{group[0].index}">')
        else:
            sb.append("<ol>")
        for footnote in group:
            _render_item(sb, footnote, config)
        if pretty:
            sb.append("\n\t")
        sb.append("</ol>")
    if pretty:
        sb.append("\n")
    sb.append(f"</{config.tag}>")
    return sb.build()
