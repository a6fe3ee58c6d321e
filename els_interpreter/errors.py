"""Error taxonomy for the command interpreter.

Every error is turned into an ERROR envelope by the dispatcher; the ``kind``
attribute is what ends up in ``ResultEnvelope.error_kind``.
"""


class InterpreterError(Exception):
    """Base class for errors surfaced to the caller as ERROR envelopes."""

    kind = "InterpreterError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingArguments(InterpreterError):
    kind = "MissingArguments"

    def __init__(self, message: str = "Arguments missing"):
        super().__init__(message)


class BadPath(InterpreterError):
    """Path segment count does not match what the verb expects."""

    kind = "BadPath"

    def __init__(self, expected: str):
        super().__init__(f"Bad URL (it should be {expected})")
        self.expected = expected


class UnknownMethod(InterpreterError):
    kind = "UnknownMethod"

    def __init__(self, verb: str):
        super().__init__("Unknown method")
        self.verb = verb


class NotFound(InterpreterError):
    kind = "NotFound"

    def __init__(self, message: str = "Document not found"):
        super().__init__(message)


class InvalidSize(InterpreterError):
    kind = "InvalidSize"

    def __init__(self, raw: str):
        super().__init__(f"Invalid size '{raw}' (it should be a non-negative integer)")
        self.raw = raw


class InvalidJson(InterpreterError):
    kind = "InvalidJson"


class EngineError(InterpreterError):
    """Any failure raised by the underlying engine call."""

    kind = "EngineError"
