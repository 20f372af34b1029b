"""Utility modules for extranotes.

Provides:
- text: escape_html, normalize_newlines, is_tag_name for text processing
- logger: get_logger for logging
"""

from extranotes.utils.logger import get_logger
from extranotes.utils.text import escape_html, is_tag_name, normalize_newlines

__all__ = [
    "escape_html",
    "get_logger",
    "is_tag_name",
    "normalize_newlines",
]
