"""Pure function: renumber 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from notitas import renumber

docs = [
    f"Doc {i} cites[^src{i}] and[^intro].\n\n[^intro]: Shared\n[^src{i}]: Source {i}"
    for i in range(1000)
]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(renumber, docs))

print(f"Renumbered {len(results)} documents in parallel")
print("Changed:", sum(r.changed for r in results))
print("First doc:")
print(results[0].document)
