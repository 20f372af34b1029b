"""Reference scanning, numbering and linking.

A reference is ``[^id]`` not immediately followed by ``:`` (which would make
it a definition marker). A reference is confirmed only when the same text
also holds a definition marker ``[^id]:`` for its identifier; unconfirmed
markers are left exactly as written.

Identifiers match ``\\w+``: digits as in ``[^1]`` as well as names such as
``[^note]`` or ``[^src_2]``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from extranotes.nodes import Reference, make_id
from extranotes.utils.logger import get_logger
from extranotes.utils.text import escape_html

if TYPE_CHECKING:
    from extranotes.config import FootnoteConfig
    from extranotes.counters import FootnoteCounters

logger = get_logger(__name__)

REFERENCE_PATTERN = re.compile(r"\[\^(\w+)\](?!:)")
DEFINITION_MARKER_PATTERN = re.compile(r"\[\^(\w+)\]:")


def defined_identifiers(text: str) -> frozenset[str]:
    """Identifiers that have at least one definition marker in text."""
    return frozenset(match.group(1) for match in DEFINITION_MARKER_PATTERN.finditer(text))


def scan_references(text: str) -> tuple[str, ...]:
    """Find confirmed reference identifiers in order of first appearance.

    Args:
        text: Source text

    Returns:
        Distinct identifiers that are referenced and defined.
    """
    defined = defined_identifiers(text)
    confirmed: dict[str, None] = {}
    skipped: set[str] = set()

    for match in REFERENCE_PATTERN.finditer(text):
        identifier = match.group(1)
        if identifier in confirmed or identifier in skipped:
            continue
        if identifier not in defined:
            logger.debug("Reference [^%s] has no definition, leaving it as is", identifier)
            skipped.add(identifier)
            continue
        confirmed[identifier] = None

    return tuple(confirmed)


def sequence_references(
    identifiers: tuple[str, ...],
    counters: FootnoteCounters,
    *,
    continuous: bool,
) -> tuple[Reference, ...]:
    """Number confirmed identifiers.

    Per-call numbering restarts at 1 and ids carry the batch id; continuous
    numbering starts at counters.footnote_index and ids are the bare number.
    The counters are only read here.

    Args:
        identifiers: Confirmed identifiers in scan order
        counters: Render counters
        continuous: Carry numbering across calls

    Returns:
        One Reference per identifier, in scan order.
    """
    start = counters.footnote_index if continuous else 1
    batch = counters.footnotes_id
    return tuple(
        Reference(
            identifier=identifier,
            index=index,
            id=make_id(index, batch, continuous=continuous),
        )
        for index, identifier in enumerate(identifiers, start=start)
    )


def render_reference(reference: Reference, reference_class: str) -> str:
    """Render the superscript anchor that replaces a reference marker."""
    return (
        f'<sup id="fnref{reference.id}" class="{escape_html(reference_class)}">'
        f'<a href="#fn{reference.id}" role="doc-noteref">{reference.index}</a>'
        "</sup>"
    )


def link_references(
    text: str,
    references: tuple[Reference, ...],
    config: FootnoteConfig,
) -> str:
    """Replace every reference marker of a confirmed identifier with its anchor.

    Repeated markers of one identifier all get the same number and the same
    ``fnref`` id, so the resulting HTML holds duplicate ids when a footnote
    is cited more than once. Back-links always return to that shared id.

    Args:
        text: Source text
        references: Numbered references
        config: Footnote configuration (reference_class)

    Returns:
        Text with anchors in place of confirmed markers.
    """
    anchors = {ref.identifier: render_reference(ref, config.reference_class) for ref in references}

    def fn(match: re.Match[str]) -> str:
        return anchors.get(match.group(1), match.group(0))

    return REFERENCE_PATTERN.sub(fn, text)
