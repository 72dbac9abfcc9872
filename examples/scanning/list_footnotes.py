"""Inspect references and definitions without changing anything."""

from notitas import ordered_labels, scan_definitions, scan_references

source = """Text[^why] with a repeat[^why] and[^how].

[^how]: How it works.
[^unused]: Nobody points here.
"""

for ref in scan_references(source):
    print(f"ref   {ref.label!r:10} at {ref.offset}-{ref.end_offset}")

referenced = set(ordered_labels(source))
for definition in scan_definitions(source):
    status = "live" if definition.label in referenced else "orphan"
    print(f"def   {definition.label!r:10} line {definition.lineno} ({status})")
