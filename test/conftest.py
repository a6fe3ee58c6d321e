"""Root conftest.py — shared fixtures for the entire test suite."""

import sys
import uuid
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# ---------------------------------------------------------------------------
# Make the package importable without installing it
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from els_interpreter.interpreter import Interpreter  # noqa: E402
from els_interpreter.models import SearchResult  # noqa: E402


# ---------------------------------------------------------------------------
# In-memory engine
# ---------------------------------------------------------------------------

class FakeEngine:
    """In-memory stand-in for EngineClient.

    Understands ``match_all``, ``term`` and ``match`` queries (exact equality)
    and honours ``size`` (default 10), which is enough to exercise the handlers.
    """

    def __init__(self):
        self.documents: dict[tuple[str, str], dict[str, dict]] = {}
        self.search_calls: list[dict] = []

    def open(self):
        return self

    def close(self) -> None:
        pass

    def add(self, index: str, doc_type: str, doc_id: str, source: dict) -> None:
        self.documents.setdefault((index, doc_type), {})[doc_id] = dict(source)

    def get_document(self, index, doc_type, doc_id):
        source = self.documents.get((index, doc_type), {}).get(doc_id)
        return dict(source) if source is not None else None

    def search(self, indices, doc_types, body):
        self.search_calls.append({"indices": indices, "doc_types": doc_types, "body": body})
        matched = []
        for (index, doc_type), docs in self.documents.items():
            if indices and index not in indices:
                continue
            if doc_types and doc_type not in doc_types:
                continue
            matched.extend(src for src in docs.values() if self._matches(src, body.get("query")))
        size = body.get("size", 10)
        return SearchResult(total=len(matched), hits=[dict(src) for src in matched[:size]])

    def index_document(self, index, doc_type, body, doc_id=None):
        doc_id = doc_id or uuid.uuid4().hex
        self.add(index, doc_type, doc_id, body)
        return doc_id

    def delete_document(self, index, doc_type, doc_id):
        return self.documents.get((index, doc_type), {}).pop(doc_id, None) is not None

    @staticmethod
    def _matches(source: dict, query: dict | None) -> bool:
        if not query or "match_all" in query:
            return True
        for kind in ("term", "match"):
            if kind in query:
                return all(source.get(field) == value for field, value in query[kind].items())
        return False


# ---------------------------------------------------------------------------
# Common fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_engine():
    """Empty in-memory engine."""
    return FakeEngine()


@pytest.fixture
def seeded_engine(fake_engine, sample_documents):
    """In-memory engine holding the sample documents under logs/event."""
    for doc_id, source in sample_documents.items():
        fake_engine.add("logs", "event", doc_id, source)
    return fake_engine


@pytest.fixture
def interpreter(seeded_engine):
    return Interpreter(seeded_engine)


@pytest.fixture
def mock_engine():
    """MagicMock engine for asserting on the exact calls made."""
    return MagicMock()


@pytest.fixture
def sample_documents():
    """Realistic heterogeneous log documents keyed by id."""
    return {
        "1": {"level": "INFO", "service": "api", "status": 200},
        "2": {"level": "ERROR", "service": "api", "status": 500, "message": "boom"},
        "3": {"level": "INFO", "service": "worker", "duration_ms": 12.5},
    }


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set all engine env vars to safe test values."""
    monkeypatch.setenv("ELASTICSEARCH_HOST", "es.test.local")
    monkeypatch.setenv("ELASTICSEARCH_PORT", "9201")
    monkeypatch.setenv("ELASTICSEARCH_CLUSTER_NAME", "test-cluster")
    monkeypatch.setenv("ELASTICSEARCH_TIMEOUT", "5")
