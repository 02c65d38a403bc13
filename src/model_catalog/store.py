"""Flat-file data store: ``providers/``, ``aliases/`` and ``index.json``."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from model_catalog.model.types import IndexDocument, ProviderDocument

log = logging.getLogger(__name__)

PROVIDERS_DIR = "providers"
ALIASES_DIR = "aliases"
INDEX_FILE = "index.json"


def read_json(path: Path) -> Any:
    """Read and decode a JSON file. Raises ``OSError`` or ``ValueError``."""
    return json.loads(path.read_text(encoding="utf-8"))


def write_json(path: Path, data: Any) -> None:
    """Write *data* as two-space indented JSON with a trailing newline."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )


class DataStore:
    """The directory of JSON documents shared by the sync and validate tools."""

    def __init__(self, root: Path | str = ".") -> None:
        self.root = Path(root)

    @property
    def providers_dir(self) -> Path:
        return self.root / PROVIDERS_DIR

    @property
    def aliases_dir(self) -> Path:
        return self.root / ALIASES_DIR

    @property
    def index_path(self) -> Path:
        return self.root / INDEX_FILE

    def provider_path(self, provider_id: str) -> Path:
        return self.providers_dir / f"{provider_id}.json"

    def relative(self, path: Path) -> str:
        """Path of *path* relative to the store root, with forward slashes."""
        return path.relative_to(self.root).as_posix()

    # --- listing --------------------------------------------------------------

    def provider_files(self) -> list[Path] | None:
        """Sorted provider documents, or ``None`` when the directory is missing."""
        return _json_files(self.providers_dir)

    def alias_files(self) -> list[Path] | None:
        """Sorted alias documents, or ``None`` when the directory is missing."""
        return _json_files(self.aliases_dir)

    # --- loading --------------------------------------------------------------

    def load_stored_models(self, provider_id: str) -> list[dict[str, Any]] | None:
        """Raw model records of the stored document for *provider_id*.

        Only a missing or undecodable file yields ``None``. Records are not
        checked against the schema; entries without a string ``id`` are skipped.
        """
        path = self.provider_path(provider_id)
        if not path.exists():
            return None
        try:
            data = read_json(path)
        except (OSError, ValueError) as exc:
            log.warning("Ignoring unreadable %s: %s", self.relative(path), exc)
            return None
        models = data.get("models") if isinstance(data, dict) else None
        if not isinstance(models, list):
            return []
        return [m for m in models if isinstance(m, dict) and isinstance(m.get("id"), str)]

    def load_index(self) -> IndexDocument | None:
        """Load ``index.json``; a missing or malformed file yields ``None``."""
        if not self.index_path.exists():
            return None
        try:
            return IndexDocument.from_dict(read_json(self.index_path))
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            log.warning("Ignoring unreadable %s: %s", INDEX_FILE, exc)
            return None

    # --- writing --------------------------------------------------------------

    def write_provider(self, document: ProviderDocument) -> Path:
        path = self.provider_path(document.provider.id)
        write_json(path, document.to_dict())
        return path

    def write_index(self, document: IndexDocument) -> Path:
        write_json(self.index_path, document.to_dict())
        return self.index_path


def _json_files(directory: Path) -> list[Path] | None:
    if not directory.is_dir():
        return None
    return sorted(p for p in directory.iterdir() if p.suffix == ".json" and p.is_file())
