"""Text processing utilities for extranotes.

Example:
    >>> from extranotes.utils.text import normalize_newlines
    >>> normalize_newlines("a\\r\\nb")
    'a\\nb'
"""

from __future__ import annotations

import html as html_module
import re

_NEWLINE_PATTERN = re.compile(r"\r\n?")

# Bare element name: letter first, then letters, digits or dashes
_TAG_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9-]*")


def normalize_newlines(text: str) -> str:
    """Convert Windows (\\r\\n) and old Mac (\\r) line endings to \\n.

    Args:
        text: Text to normalize

    Returns:
        Text using only \\n line endings
    """
    if "\r" not in text:
        return text
    return _NEWLINE_PATTERN.sub("\n", text)


def is_tag_name(name: str) -> bool:
    """Check whether name is usable as a bare HTML element name.

    Examples:
        >>> is_tag_name("div")
        True
        >>> is_tag_name("my-notes")
        True
        >>> is_tag_name("div class=x")
        False
    """
    return bool(_TAG_NAME_PATTERN.fullmatch(name))


def escape_html(text: str) -> str:
    """Escape HTML special characters for safe use in attributes.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text safe for use in attribute values

    Examples:
        >>> escape_html('footnote-ref" onclick="x')
        'footnote-ref&quot; onclick=&quot;x'
    """
    if not text:
        return ""

    escaped = html_module.escape(text, quote=True)
    return escaped.replace("'", "&#x27;")
