"""One page, several fields: numbering carries over between them.

Each field is formatted separately (as a CMS formats each text field), but
all of them share one render scope, so continuous numbering picks up where
the previous field stopped and the endnote lists start at the right number.
"""

from extranotes import FootnoteFormatter

fields = [
    "Intro with a claim[^1] and a quote[^2].\n[^1]: First source.\n[^2]: <em>Second</em> source.",
    "Body with one more note[^a].\n[^a]: Third source, <script>alert(1)</script>sanitized.",
]

formatter = FootnoteFormatter({"continuous": True, "pretty": True})
for html in formatter.format_many(fields):
    print(html)
    print("-" * 40)
