from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

MODELS_DEV_API = "https://models.dev/api.json"


@dataclass(frozen=True)
class CatalogConfig:
    root: Path = Path(".")
    api_url: str = MODELS_DEV_API
    schema_ref: str = "../schema/model.schema.json"
    source: str = "models.dev"
    currency: str = "USD"
    index_version: str = "1.0.0"
    timeout: float = 30.0  # seconds, whole request
