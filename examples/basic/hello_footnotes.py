"""Renumber footnotes in 3 lines, zero config, zero deps."""

from notitas import renumber

result = renumber("Intro[^b] then[^a].\n\n[^a]: Second\n[^b]: First")
print(result.document)
print(f"changed={result.changed} count={result.count}")
