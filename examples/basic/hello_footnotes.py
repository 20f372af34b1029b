"""Footnotes in 3 lines, zero config, zero deps."""

from extranotes import add_footnotes

html = add_footnotes("This is a reference[^1] within a text\n[^1]: And this is a footnote")
print(html)
