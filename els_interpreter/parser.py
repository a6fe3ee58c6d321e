"""Command line parsing: tokenizer, path resolver and search payload parsing.

Grammar of one command:

    <verb> /<seg1>[/<seg2>[/<seg3>]] [<size> [<json body>]]
"""

import json
from typing import Any

from .errors import InvalidJson, InvalidSize, MissingArguments
from .models import Command, ResourcePath, SearchSpec


def tokenize(line: str) -> Command:
    """Split a raw line into verb, path and payload.

    The payload is everything after the path, trimmed, with its internal
    whitespace (including newlines) left untouched.

    Raises:
        MissingArguments: if the verb or the path is missing
    """
    items = line.strip().split(None, 2)
    if len(items) < 2:
        raise MissingArguments()

    verb, path = items[0], items[1]
    payload = items[2].strip() if len(items) > 2 else None

    return Command(
        verb=verb,
        path=path,
        payload=payload or None,
        segments=split_path(path),
    )


def split_path(path: str) -> list[str]:
    """Split on '/' and drop empty segments."""
    return [segment for segment in path.strip().split("/") if segment]


def resolve_path(segments: list[str]) -> ResourcePath:
    """Map ordered segments onto container / collection / document id."""
    padded = list(segments[:3]) + [None] * (3 - min(len(segments), 3))
    container, collection, document_id = padded
    return ResourcePath(container=container, collection=collection, document_id=document_id)


def parse_json_object(text: str) -> dict[str, Any]:
    """Parse ``text`` as a JSON object.

    Raises:
        InvalidJson: if the text is not valid JSON or not an object
    """
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidJson(f"Invalid JSON: {e}") from e
    if not isinstance(value, dict):
        raise InvalidJson(f"Invalid JSON: expected an object, got {type(value).__name__}")
    return value


def parse_search_spec(payload: str | None) -> SearchSpec:
    """Build a SearchSpec from '<size> [<json body>]'.

    An empty payload leaves both the size and the body to the engine defaults.
    """
    if not payload or not payload.strip():
        return SearchSpec()

    parts = payload.strip().split(None, 1)
    raw_size = parts[0]
    if not (raw_size.isascii() and raw_size.isdigit()):
        raise InvalidSize(raw_size)

    body = parse_json_object(parts[1]) if len(parts) > 1 else None
    return SearchSpec(size=int(raw_size), body=body)
