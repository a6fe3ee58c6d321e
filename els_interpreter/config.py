"""Shared configuration for the Elasticsearch interpreter."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

ELASTICSEARCH_HOST = os.getenv("ELASTICSEARCH_HOST", "localhost")
ELASTICSEARCH_PORT = int(os.getenv("ELASTICSEARCH_PORT", "9200"))
ELASTICSEARCH_CLUSTER_NAME = os.getenv("ELASTICSEARCH_CLUSTER_NAME", "elasticsearch")

# Client-side timeout for a single engine request, in seconds
ELASTICSEARCH_TIMEOUT = float(os.getenv("ELASTICSEARCH_TIMEOUT", "30"))

LOG_DIR = Path(os.getenv("ELS_LOG_DIR", "logs"))


class EngineSettings(BaseModel):
    """Connection settings, used only when the engine connection is opened."""

    host: str = ELASTICSEARCH_HOST
    port: int = Field(default=ELASTICSEARCH_PORT, gt=0, lt=65536)
    cluster_name: str = ELASTICSEARCH_CLUSTER_NAME
    timeout: float = Field(default=ELASTICSEARCH_TIMEOUT, gt=0)

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


def load_settings(**overrides) -> EngineSettings:
    """Build settings from the environment, applying non-None overrides."""
    return EngineSettings(**{k: v for k, v in overrides.items() if v is not None})
