"""Pydantic models shared across the interpreter."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Verb(str, Enum):
    """The fixed set of DSL verbs."""

    GET = "get"
    COUNT = "count"
    SEARCH = "search"
    INDEX = "index"
    DELETE = "delete"

    @classmethod
    def match(cls, raw: str) -> "Verb | None":
        """Case-insensitive exact match; ``None`` when the verb is unknown."""
        try:
            return cls(raw.lower())
        except ValueError:
            return None


class Status(str, Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class ContentType(str, Enum):
    TEXT = "TEXT"
    TABLE = "TABLE"
    JSON = "JSON"


class Command(BaseModel):
    """A tokenized command line."""

    verb: str
    path: str
    payload: str | None = None
    segments: list[str] = Field(default_factory=list, description="Non-empty path segments")


def _split_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [item for item in value.split(",") if item]


class ResourcePath(BaseModel):
    """Semantic view of the path segments: /container/collection/document_id."""

    container: str | None = None
    collection: str | None = None
    document_id: str | None = None

    @property
    def containers(self) -> list[str]:
        return _split_list(self.container)

    @property
    def collections(self) -> list[str]:
        return _split_list(self.collection)


class SearchSpec(BaseModel):
    """Size limit plus optional raw query body."""

    size: int | None = Field(default=None, ge=0)
    body: dict[str, Any] | None = None

    def to_request_body(self) -> dict[str, Any]:
        """Merge the raw body with the size override (size wins)."""
        request = dict(self.body) if self.body else {}
        if self.size is not None:
            request["size"] = self.size
        return request


class SearchResult(BaseModel):
    total: int = 0
    hits: list[dict[str, Any]] = Field(default_factory=list, description="Hit sources in order")


class ResultEnvelope(BaseModel):
    """Uniform result wrapper returned for every invocation."""

    status: Status
    content_type: ContentType = ContentType.TEXT
    body: str = ""
    error_kind: str | None = Field(
        default=None, description="Error taxonomy name, set only on ERROR"
    )

    @property
    def ok(self) -> bool:
        return self.status is Status.SUCCESS

    @classmethod
    def success(cls, body: str, content_type: ContentType = ContentType.TEXT) -> "ResultEnvelope":
        return cls(status=Status.SUCCESS, content_type=content_type, body=body)

    @classmethod
    def error(cls, message: str, kind: str) -> "ResultEnvelope":
        return cls(status=Status.ERROR, content_type=ContentType.TEXT, body=message, error_kind=kind)
