"""Composable sanitization policies for footnote bodies.

Definition bodies may carry inline HTML. Before they are rendered as
endnotes, every tag whose name is not on the allow-list is removed; the
text between tags is kept. Only tag names gate removal, attributes are not
filtered. Policies are immutable and compose via the | operator.

Example:
    >>> from extranotes.sanitize import policy_for, sanitize
    >>> policy = policy_for(frozenset({"em"}))
    >>> sanitize('<em>See</em> <span class="x">page 4</span>', policy=policy)
    '<em>See</em> page 4'

Malformed markup never raises: a stray ``<`` or an unclosed tag that the
patterns do not recognise is left as literal text.
"""

import re
from collections.abc import Callable

# Comments, doctype-style declarations and processing instructions
_COMMENT_PATTERN = re.compile(r"<!--.*?-->|<![^>]*>|<\?.*?\?>", re.DOTALL)

# Tag attributes: quoted values may contain ">"; an unbalanced quote falls
# back to the first ">"
_ATTRIBUTES = r"""(?:(?:"[^"]*"|'[^']*'|[^'">])*|[^>]*)"""

# Opening, closing or self-closing tag; group 1 is the tag name
_TAG_PATTERN = re.compile(r"</?([A-Za-z][A-Za-z0-9:-]*)\b" + _ATTRIBUTES + ">")

# Elements whose content is code, not prose
_RAW_TEXT_TAGS = frozenset(("script", "style"))

_RAW_TEXT_PATTERN = re.compile(
    r"<(script|style)\b" + _ATTRIBUTES + r">.*?</\1\s*>",
    re.DOTALL | re.IGNORECASE,
)


class Policy:
    """Wrapper for str -> str transform, supports composition via |."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[str], str]) -> None:
        self._fn = fn

    def __call__(self, body: str) -> str:
        return self._fn(body)

    def __or__(self, other: "Policy") -> "Policy":
        """Chain policies: (self | other)(body) applies self then other."""

        def chained(body: str) -> str:
            return other._fn(self._fn(body))

        return Policy(chained)


def _strip_html_comments(body: str) -> str:
    """Remove comments, declarations and processing instructions."""
    return _COMMENT_PATTERN.sub("", body)


strip_html_comments = Policy(_strip_html_comments)


def drop_raw_text(allowed: frozenset[str]) -> Policy:
    """Remove <script> and <style> elements, content included, unless allowed."""
    dropped = _RAW_TEXT_TAGS - allowed
    if not dropped:
        return Policy(lambda body: body)

    def fn(match: re.Match[str]) -> str:
        if match.group(1).lower() in dropped:
            return ""
        return match.group(0)

    return Policy(lambda body: _RAW_TEXT_PATTERN.sub(fn, body))


def allow_tags(allowed: frozenset[str]) -> Policy:
    """Keep only tags whose lower-cased name is in allowed.

    Args:
        allowed: Lower-cased tag names to keep.

    Returns:
        Policy removing every other opening, closing or self-closing tag.
    """

    def fn(match: re.Match[str]) -> str:
        if match.group(1).lower() in allowed:
            return match.group(0)
        return ""

    return Policy(lambda body: _TAG_PATTERN.sub(fn, body))


def until_stable(policy: Policy) -> Policy:
    """Reapply policy until the body stops changing.

    Removing one tag can join the text around it into another tag
    (``<<div>script>`` becomes ``<script>``), so a single pass is not enough.
    Every filter in this module only deletes text, so the loop ends.
    """

    def fn(body: str) -> str:
        while True:
            cleaned = policy(body)
            if cleaned == body:
                return cleaned
            body = cleaned

    return Policy(fn)


def policy_for(allowed: frozenset[str]) -> Policy:
    """Build the body policy for an allow-list of tag names."""
    return until_stable(strip_html_comments | drop_raw_text(allowed) | allow_tags(allowed))


def sanitize(body: str, *, policy: Policy | Callable[[str], str]) -> str:
    """Apply a sanitization policy to a footnote body.

    Args:
        body: Raw definition body.
        policy: Policy or callable str -> str.

    Returns:
        Sanitized body.
    """
    return policy(body)


__all__ = [
    "Policy",
    "allow_tags",
    "drop_raw_text",
    "policy_for",
    "sanitize",
    "strip_html_comments",
    "until_stable",
]
