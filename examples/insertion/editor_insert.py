"""Insert a footnote at the cursor, the way an editor command would."""

from notitas import InsertConfig, insert_footnote

document = """First claim[^1] and a later one[^2].

[^1]: Source for the first claim.
[^2]: Source for the later claim.
"""

# Cursor sits right after "First claim[^1] and"
cursor = document.index(" a later")
result = insert_footnote(document, cursor, "A new middle source.")

print(result.document)
print("Cursor:", result.cursor, repr(result.document[result.cursor - 4 : result.cursor]))
print("New footnote number:", result.number)

# Settings from a host application
config = InsertConfig.from_dict({"renumber": False, "mySetting": "default"})
raw = insert_footnote(document, cursor, "Appended as-is.", config=config)
print(raw.document)
