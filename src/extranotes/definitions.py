"""Definition scanning and body extraction.

A definition starts at ``[^id]:`` and runs up to the next definition marker
or the end of the text, across lines:

    Text with a note[^1] and another[^2].
    [^1]: First body,
    still the first body.
    [^2]: Second body.

Definitions never render inline: each one matched to a confirmed reference
is cut out of the text and becomes a Footnote.
"""

from __future__ import annotations

import re
from operator import attrgetter
from typing import TYPE_CHECKING

from extranotes.nodes import Footnote, Reference
from extranotes.sanitize import policy_for, sanitize
from extranotes.utils.logger import get_logger

if TYPE_CHECKING:
    from extranotes.config import FootnoteConfig

logger = get_logger(__name__)

DEFINITION_PATTERN = re.compile(r"\[\^(\w+)\]:(.*?)(?=\[\^\w+\]:|\Z)", re.DOTALL)


def extract_definitions(
    text: str,
    references: tuple[Reference, ...],
    config: FootnoteConfig,
) -> tuple[str, tuple[Footnote, ...]]:
    """Cut confirmed definitions out of text and turn them into footnotes.

    The first definition of an identifier wins; later ones are dropped from
    the text. Definitions nobody references stay in place unless
    config.keep_orphan_definitions is False, in which case they are dropped.

    Args:
        text: Text whose references are already linked
        references: Numbered references of this call
        config: Footnote configuration (allowed_tags, keep_orphan_definitions)

    Returns:
        Tuple of (remaining text, footnotes ordered by index).
    """
    by_identifier = {ref.identifier: ref for ref in references}
    policy = policy_for(config.allowed_tag_names)
    found: dict[str, Footnote] = {}

    def fn(match: re.Match[str]) -> str:
        identifier = match.group(1)
        reference = by_identifier.get(identifier)
        if reference is None:
            if config.keep_orphan_definitions:
                return match.group(0)
            logger.debug("Dropping definition [^%s] without reference", identifier)
            return ""
        if identifier in found:
            logger.debug("Discarding repeated definition [^%s]", identifier)
            return ""
        found[identifier] = Footnote(
            identifier=identifier,
            index=reference.index,
            id=reference.id,
            body=sanitize(match.group(2), policy=policy).strip(),
        )
        return ""

    remaining = DEFINITION_PATTERN.sub(fn, text)
    return remaining, tuple(sorted(found.values(), key=attrgetter("index")))
