"""Response formatting — tab-separated tables for hits, pretty JSON for documents."""

import json
from typing import Any


def format_cell(value: Any) -> str:
    """Stringify one field value for a table cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def format_table(documents: list[dict[str, Any]]) -> str:
    """Render documents as a tab-separated table.

    The header is the sorted union of every document's field names, so rows
    from heterogeneous documents all have the same columns. A field missing
    from a document becomes an empty cell.

    Args:
        documents: Hit sources, in hit order

    Returns:
        Header line plus one line per document, each newline-terminated,
        or "" when there are no documents
    """
    if not documents:
        return ""

    keys = sorted({key for doc in documents for key in doc})

    lines = ["\t".join(keys)]
    for doc in documents:
        lines.append("\t".join(format_cell(doc.get(key)) for key in keys))

    return "\n".join(lines) + "\n"


def format_document(document: dict[str, Any]) -> str:
    """Pretty-print a single document's fields as JSON."""
    return json.dumps(document, ensure_ascii=False, indent=2)
