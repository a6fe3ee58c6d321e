"""Elasticsearch client over the REST API.

One ``EngineClient`` is opened at startup, shared by every command and closed
once at shutdown. Handlers only rely on the ``SearchEngine`` protocol, so any
object with the same four methods can stand in for it.
"""

import logging
from typing import Any, Protocol
from urllib.parse import quote

import httpx

from .config import EngineSettings
from .errors import EngineError
from .models import SearchResult

logger = logging.getLogger("els_interpreter")


class SearchEngine(Protocol):
    def get_document(self, index: str, doc_type: str, doc_id: str) -> dict[str, Any] | None: ...

    def search(
        self, indices: list[str], doc_types: list[str], body: dict[str, Any]
    ) -> SearchResult: ...

    def index_document(
        self, index: str, doc_type: str, body: dict[str, Any], doc_id: str | None = None
    ) -> str: ...

    def delete_document(self, index: str, doc_type: str, doc_id: str) -> bool: ...


def _path(*segments: str) -> str:
    """Build a URL path, escaping each segment but keeping list separators."""
    return "/" + "/".join(quote(segment, safe=",*") for segment in segments)


def _is_missing(resp: httpx.Response) -> bool:
    """A 404 that reports a missing document, not a missing index."""
    if resp.status_code != 404:
        return False
    try:
        data = resp.json()
    except ValueError:
        return True
    return not (isinstance(data, dict) and "error" in data)


def _total_hits(hits: dict[str, Any]) -> int:
    # 7.x and later report {"value": n, "relation": "eq"}
    total = hits.get("total", 0)
    if isinstance(total, dict):
        return int(total.get("value", 0))
    return int(total or 0)


class EngineClient:
    """Long-lived connection to one Elasticsearch cluster."""

    def __init__(self, settings: EngineSettings):
        self.settings = settings
        self._http: httpx.Client | None = None

    # ── Lifecycle ───────────────────────────────

    def open(self) -> "EngineClient":
        """Open the HTTP client and check we reached the configured cluster.

        Raises:
            EngineError: if the node cannot be reached, does not answer like
                Elasticsearch or belongs to another cluster
        """
        url = self.settings.base_url
        self._http = httpx.Client(base_url=url, timeout=self.settings.timeout)
        try:
            resp = self._http.get("/")
            resp.raise_for_status()
            info = resp.json()
        except httpx.HTTPError as e:
            self.close()
            raise EngineError(f"Cannot connect to Elasticsearch at {url}: {e}") from e
        except ValueError as e:
            self.close()
            raise EngineError(f"No Elasticsearch node at {url}: response is not JSON") from e

        if not isinstance(info, dict):
            self.close()
            raise EngineError(f"No Elasticsearch node at {url}: unexpected response")

        cluster_name = info.get("cluster_name")
        if cluster_name != self.settings.cluster_name:
            self.close()
            raise EngineError(
                f"Connected to cluster '{cluster_name}', "
                f"expected '{self.settings.cluster_name}'"
            )

        logger.info("Connected to Elasticsearch cluster '%s' at %s", cluster_name, url)
        return self

    def close(self) -> None:
        if self._http is not None:
            self._http.close()
            self._http = None
            logger.info("Elasticsearch connection closed")

    def __enter__(self) -> "EngineClient":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def http(self) -> httpx.Client:
        if self._http is None:
            raise EngineError("Elasticsearch connection is not open")
        return self._http

    # ── Operations ──────────────────────────────

    def get_document(self, index: str, doc_type: str, doc_id: str) -> dict[str, Any] | None:
        """Fetch a document source by id, or None if it does not exist."""
        resp = self.http.get(_path(index, doc_type, doc_id))
        if _is_missing(resp):
            return None
        resp.raise_for_status()
        data = resp.json()
        if not data.get("found", False):
            return None
        return data.get("_source") or {}

    def search(
        self, indices: list[str], doc_types: list[str], body: dict[str, Any]
    ) -> SearchResult:
        """Run a search and return the total hit count plus the hit sources."""
        segments = []
        if indices or doc_types:
            segments.append(",".join(indices) or "_all")
        if doc_types:
            segments.append(",".join(doc_types))
        segments.append("_search")

        resp = self.http.post(_path(*segments), json=body)
        resp.raise_for_status()
        hits = resp.json().get("hits", {})
        return SearchResult(
            total=_total_hits(hits),
            hits=[hit.get("_source") or {} for hit in hits.get("hits", [])],
        )

    def index_document(
        self, index: str, doc_type: str, body: dict[str, Any], doc_id: str | None = None
    ) -> str:
        """Create or replace a document; the engine picks the id when none is given."""
        if doc_id is None:
            resp = self.http.post(_path(index, doc_type), json=body)
        else:
            resp = self.http.put(_path(index, doc_type, doc_id), json=body)
        resp.raise_for_status()
        return str(resp.json()["_id"])

    def delete_document(self, index: str, doc_type: str, doc_id: str) -> bool:
        """Delete by id. Returns False when there was nothing to delete."""
        resp = self.http.delete(_path(index, doc_type, doc_id))
        if _is_missing(resp):
            return False
        resp.raise_for_status()
        data = resp.json()
        if data.get("result") == "not_found":
            return False
        return bool(data.get("found", True))
