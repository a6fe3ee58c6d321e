"""Operation handlers — one per verb.

Each handler takes the engine and the tokenized command, checks the path
arity for its verb, runs one engine call and maps the response into a
``ResultEnvelope``. Validation failures are raised as ``InterpreterError``
subclasses and turned into ERROR envelopes by the dispatcher.
"""

import logging

from .engine import SearchEngine
from .errors import BadPath, InvalidJson, NotFound
from .formatter import format_document, format_table
from .models import Command, ContentType, ResourcePath, ResultEnvelope, SearchSpec
from .parser import parse_json_object, parse_search_spec, resolve_path

logger = logging.getLogger("els_interpreter")

DOCUMENT_SHAPE = "/index/type/id"
SEARCH_SHAPE = "/index1,index2,.../type1,type2,..."
INDEX_SHAPE = "/index/type or /index/type/id"


def _document_path(command: Command) -> ResourcePath:
    """Resolve a path that must address exactly one document."""
    segments = command.segments
    if len(segments) != 3 or not all(segment.strip() for segment in segments):
        raise BadPath(DOCUMENT_SHAPE)
    return resolve_path(segments)


def _search_path(command: Command) -> ResourcePath:
    if len(command.segments) > 2:
        raise BadPath(SEARCH_SHAPE)
    return resolve_path(command.segments)


def handle_get(engine: SearchEngine, command: Command) -> ResultEnvelope:
    path = _document_path(command)
    source = engine.get_document(path.container, path.collection, path.document_id)
    if source is None:
        raise NotFound()
    return ResultEnvelope.success(format_document(source), ContentType.JSON)


def handle_count(engine: SearchEngine, command: Command) -> ResultEnvelope:
    path = _search_path(command)
    # Only the total is needed, whatever size the payload asked for
    spec = parse_search_spec(command.payload)
    spec = SearchSpec(size=0, body=spec.body)

    result = engine.search(path.containers, path.collections, spec.to_request_body())
    return ResultEnvelope.success(str(result.total), ContentType.TEXT)


def handle_search(engine: SearchEngine, command: Command) -> ResultEnvelope:
    path = _search_path(command)
    spec = parse_search_spec(command.payload)

    result = engine.search(path.containers, path.collections, spec.to_request_body())
    logger.debug("Search matched %d documents, %d returned", result.total, len(result.hits))
    return ResultEnvelope.success(format_table(result.hits), ContentType.TABLE)


def handle_index(engine: SearchEngine, command: Command) -> ResultEnvelope:
    segments = command.segments
    if len(segments) < 2 or len(segments) > 3:
        raise BadPath(INDEX_SHAPE)
    path = resolve_path(segments)

    if not command.payload:
        raise InvalidJson("Invalid JSON: a document body is required")
    body = parse_json_object(command.payload)

    doc_id = engine.index_document(path.container, path.collection, body, path.document_id)
    return ResultEnvelope.success(doc_id, ContentType.TEXT)


def handle_delete(engine: SearchEngine, command: Command) -> ResultEnvelope:
    path = _document_path(command)
    if not engine.delete_document(path.container, path.collection, path.document_id):
        raise NotFound()
    return ResultEnvelope.success(path.document_id, ContentType.TEXT)
