"""Thread safe: render 1000 pages in parallel, each with its own numbering."""

from concurrent.futures import ThreadPoolExecutor

from extranotes import FootnoteFormatter

formatter = FootnoteFormatter()

pages = [
    [f"Page {i} intro[^1]\n[^1]: Intro note {i}", f"Page {i} body[^1]\n[^1]: Body note {i}"]
    for i in range(1000)
]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(formatter.format_many, pages))

print(f"Rendered {len(results)} pages in parallel")
print("Batch ids restart per page:", all('id="fn2:1"' in page[1] for page in results))
