"""Command dispatcher — routes a command line to its handler.

Every call to ``Interpreter.interpret`` returns exactly one ResultEnvelope.
Errors of any kind are converted to ERROR envelopes here and never propagate
to the caller.
"""

import logging
from typing import Callable

import httpx

from .engine import SearchEngine
from .errors import EngineError, InterpreterError, UnknownMethod
from .handlers import handle_count, handle_delete, handle_get, handle_index, handle_search
from .models import Command, ResultEnvelope, Verb
from .parser import tokenize

logger = logging.getLogger("els_interpreter")

Handler = Callable[[SearchEngine, Command], ResultEnvelope]

HANDLERS: dict[Verb, Handler] = {
    Verb.GET: handle_get,
    Verb.COUNT: handle_count,
    Verb.SEARCH: handle_search,
    Verb.INDEX: handle_index,
    Verb.DELETE: handle_delete,
}

# Offered at the start of a line, in this order
COMPLETIONS = ["search", "get", "index", "delete", "count"]


class Interpreter:
    """Interprets DSL command lines against one engine connection.

    The engine is owned by the caller, which opens it before the first
    command and closes it after the last one.
    """

    def __init__(self, engine: SearchEngine):
        self.engine = engine

    def interpret(self, line: str) -> ResultEnvelope:
        logger.info("Run Elasticsearch command '%s'", line)
        try:
            command = tokenize(line)
            verb = Verb.match(command.verb)
            if verb is None:
                raise UnknownMethod(command.verb)
            return HANDLERS[verb](self.engine, command)
        except InterpreterError as e:
            logger.warning("%s: %s", e.kind, e.message)
            return ResultEnvelope.error(e.message, e.kind)
        except httpx.HTTPStatusError as e:
            message = f"Error : {e.response.status_code} {e.response.text}"
            logger.warning("Engine rejected command: %s", message)
            return ResultEnvelope.error(message, EngineError.kind)
        except Exception as e:
            logger.exception("Engine call failed")
            return ResultEnvelope.error(f"Error : {e}", EngineError.kind)

    def completion(self, buffer: str, cursor: int) -> list[str]:
        """Verb candidates at the start of the line, nothing elsewhere."""
        if cursor == 0:
            return list(COMPLETIONS)
        return []

    def cancel(self) -> None:
        """In-flight commands cannot be cancelled."""

    def get_progress(self) -> int:
        return 0
