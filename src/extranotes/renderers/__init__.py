"""Endnote renderers for extranotes.

Provides:
- html: render_footnotes, the ordered-list endnotes markup
"""

from extranotes.renderers.html import render_footnotes

__all__ = ["render_footnotes"]
