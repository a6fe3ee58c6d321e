"""Elasticsearch command interpreter — a small DSL over the Elasticsearch REST API."""

from .config import EngineSettings, load_settings
from .engine import EngineClient, SearchEngine
from .interpreter import Interpreter
from .models import ContentType, ResultEnvelope, Status, Verb

__all__ = [
    "ContentType",
    "EngineClient",
    "EngineSettings",
    "Interpreter",
    "ResultEnvelope",
    "SearchEngine",
    "Status",
    "Verb",
    "load_settings",
]
