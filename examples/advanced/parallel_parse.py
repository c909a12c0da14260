"""Thread-safe parsing: parse 1000 pages in parallel."""

from concurrent.futures import ThreadPoolExecutor

from rivit import parse
from rivit.serialization import to_json

pages = [f"PAGE {i}\n/ index\nContent for page *{i}*" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse, pages))

print(f"Parsed {len(results)} pages in parallel")
print("Last page:", to_json(results[-1]))
