"""
extranotes: Markdown Extra footnotes as cross-linked HTML

Turns ``[^id]`` references and ``[^id]: text`` definitions embedded in any
text into superscript anchors and a numbered endnotes list with back-links.
Only the footnote syntax is interpreted; everything else passes through
untouched, so it can run before or after any Markdown or HTML pipeline.
Zero runtime dependencies.

Quick Start:
    >>> from extranotes import add_footnotes
    >>> html = add_footnotes("This is a reference[^1] within a text\\n[^1]: And this is a footnote")
    >>> print(html)
    This is a reference<sup id="fnref1:1" class="footnote-ref"><a href="#fn1:1" role="doc-noteref">1</a></sup> within a text
    <div class="footnotes" role="doc-endnotes"><ol><li id="fn1:1" role="doc-endnote">And this is a footnote <a href="#fnref1:1" class="footnote-backref" role="doc-backlink">&#8617;</a></li></ol></div>

Several fields on one page:
    >>> from extranotes import FootnoteFormatter
    >>> formatter = FootnoteFormatter({"continuous": True})
    >>> body, aside = formatter.format_many([page.body, page.aside])

Structured output:
    >>> result = add_footnotes(text, {"outputAsArray": True})
    >>> result.text, result.footnotes
"""

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from extranotes.config import (
    DEFAULT_INLINE_TAGS,
    FootnoteConfig,
    coerce_config,
    footnote_config_context,
    get_footnote_config,
    reset_footnote_config,
    set_footnote_config,
)
from extranotes.counters import (
    FootnoteCounters,
    footnote_render,
    get_render_counters,
    resolve_counters,
)
from extranotes.definitions import extract_definitions
from extranotes.errors import ConfigError, ExtranotesError
from extranotes.nodes import Footnote, FootnoteResult, Reference
from extranotes.references import link_references, scan_references, sequence_references
from extranotes.renderers.html import render_footnotes
from extranotes.utils.logger import get_logger
from extranotes.utils.text import normalize_newlines

__version__ = "0.1.0"

logger = get_logger(__name__)

EXAMPLE_INPUT = "This is a reference[^1] within a text\n[^1]: And this is a footnote"


def add_footnotes(
    text: str,
    config: FootnoteConfig | Mapping[str, Any] | None = None,
    field: str | None = None,
    *,
    counters: FootnoteCounters | None = None,
) -> str | FootnoteResult:
    """Convert footnote markers in text into linked references and endnotes.

    Args:
        text: Text containing ``[^id]`` references and ``[^id]:`` definitions
        config: FootnoteConfig or option mapping; the context default if None.
            Anything else is ignored in favor of the default.
        field: Optional label of the content being formatted (for logging)
        counters: Render counters; defaults to the current footnote_render()
            scope, or to fresh counters for an isolated call

    Returns:
        The text with anchors and the endnotes block appended, or a
        FootnoteResult when config.output_as_array is set. Text without
        usable footnotes comes back unchanged ("" for non-string input).

    Example:
        >>> with footnote_render():
        ...     first = add_footnotes("A[^1]\\n[^1]: one")   # ids 1:1
        ...     second = add_footnotes("B[^1]\\n[^1]: two")  # ids 2:1
    """
    cfg = coerce_config(config)

    def unchanged(value: str) -> str | FootnoteResult:
        return FootnoteResult(text=value) if cfg.output_as_array else value

    if not isinstance(text, str):
        logger.debug("Ignoring non-text value of type %s", type(text).__name__)
        return unchanged("")
    if not text:
        return unchanged(text)

    source = normalize_newlines(text)
    identifiers = scan_references(source)
    if not identifiers:
        return unchanged(text)

    state = resolve_counters(counters)
    references = sequence_references(identifiers, state, continuous=cfg.continuous)
    linked = link_references(source, references, cfg)
    remaining, footnotes = extract_definitions(linked, references, cfg)
    if not footnotes:
        return unchanged(text)

    logger.debug(
        "Linked %d footnote(s) in %s (batch %d)",
        len(footnotes),
        field or "text",
        state.footnotes_id,
    )
    state.advance(len(references), continuous=cfg.continuous)

    remaining = remaining.rstrip()
    if cfg.output_as_array:
        return FootnoteResult(text=remaining, footnotes=footnotes)
    return f"{remaining}\n{render_footnotes(footnotes, cfg)}"


class FootnoteFormatter:
    """Footnote text formatter bound to one configuration.

    Usage:
        >>> formatter = FootnoteFormatter(FootnoteConfig(pretty=True))
        >>> html = formatter("Text[^1]\\n[^1]: Note")

        >>> # One page made of several fields: batch ids keep anchors unique
        >>> summary, body = formatter.format_many([summary_text, body_text])

        >>> # Collect structured footnotes, render them once at the end
        >>> collector = FootnoteFormatter({"outputAsArray": True})
        >>> results = collector.format_many(fields)
        >>> endnotes = collector.render(fn for r in results for fn in r.footnotes)

    Thread Safety:
        The configuration is immutable and counters come from the caller or
        the current render scope, so one instance can serve many threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: FootnoteConfig | Mapping[str, Any] | None = None) -> None:
        """Initialize formatter.

        Args:
            config: FootnoteConfig or option mapping; the context default if None
        """
        self._config = coerce_config(config)

    @property
    def config(self) -> FootnoteConfig:
        return self._config

    def format(
        self,
        text: str,
        field: str | None = None,
        *,
        counters: FootnoteCounters | None = None,
    ) -> str | FootnoteResult:
        """Format one value. See add_footnotes()."""
        return add_footnotes(text, self._config, field, counters=counters)

    __call__ = format

    def format_many(
        self,
        texts: Iterable[str],
        *,
        counters: FootnoteCounters | None = None,
    ) -> list[str | FootnoteResult]:
        """Format several values as parts of one render.

        All values share one set of counters: batch ids increase per value
        and, in continuous mode, numbering carries over from value to value.

        Args:
            texts: Values in page order
            counters: Counters to resume; fresh ones when None

        Returns:
            Formatted values in the same order.
        """
        with footnote_render(counters) as scoped:
            return [add_footnotes(text, self._config, counters=scoped) for text in texts]

    def render(self, footnotes: Iterable[Footnote]) -> str:
        """Render structured footnotes with this formatter's configuration."""
        return render_footnotes(footnotes, self._config)

    def example(self) -> str:
        """Pretty-printed output for EXAMPLE_INPUT, as shown in usage help."""
        config = replace(self._config, pretty=True, output_as_array=False)
        return add_footnotes(EXAMPLE_INPUT, config, counters=FootnoteCounters())


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "add_footnotes",
    "render_footnotes",
    "EXAMPLE_INPUT",
    # Records
    "Footnote",
    "FootnoteResult",
    "Reference",
    # Configuration (ContextVar-based)
    "DEFAULT_INLINE_TAGS",
    "FootnoteConfig",
    "coerce_config",
    "get_footnote_config",
    "set_footnote_config",
    "reset_footnote_config",
    "footnote_config_context",
    # Render counters
    "FootnoteCounters",
    "footnote_render",
    "get_render_counters",
    # Errors
    "ExtranotesError",
    "ConfigError",
    # High-level
    "FootnoteFormatter",
]
