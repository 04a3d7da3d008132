"""Constellation content tables loaded from JSON files."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from star_gazer.core.config import settings
from star_gazer.core.exceptions import ContentStoreError
from star_gazer.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONTENT_DIR = Path(__file__).resolve().parent.parent / "data"
INFO_FILENAME = "constellation_info.json"
MYTH_FILENAME = "constellation_myth.json"


def _normalize_table(table: Mapping[str, Any], label: str) -> Mapping[str, str]:
    """Return a read-only copy of ``table`` keyed by lowercase name."""
    normalized: dict[str, str] = {}
    for key, value in table.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ContentStoreError(f"{label} entries must map names to text: {key!r}")
        normalized[key.lower()] = value
    return MappingProxyType(normalized)


def _read_table(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise ContentStoreError(f"content file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ContentStoreError(f"content file is not valid JSON: {path}") from exc
    if not isinstance(data, dict):
        raise ContentStoreError(f"content file must hold a JSON object: {path}")
    return data


class JsonContentStore:
    """Read-only info and myth tables keyed by lowercase constellation name."""

    def __init__(self, info: Mapping[str, Any], myth: Mapping[str, Any]) -> None:
        self._info = _normalize_table(info, "info")
        self._myth = _normalize_table(myth, "myth")

    @classmethod
    def from_directory(cls, directory: Path) -> "JsonContentStore":
        """Load both tables from ``directory``."""
        store = cls(
            _read_table(directory / INFO_FILENAME),
            _read_table(directory / MYTH_FILENAME),
        )
        logger.info(
            "constellation content loaded",
            extra={
                "content_dir": str(directory),
                "info_entries": len(store.info),
                "myth_entries": len(store.myth),
            },
        )
        return store

    @property
    def info(self) -> Mapping[str, str]:
        return self._info

    @property
    def myth(self) -> Mapping[str, str]:
        return self._myth

    def get_info(self, name: Optional[str]) -> Optional[str]:
        """Return the information text for ``name`` or ``None``."""
        if not name:
            return None
        return self._info.get(name.lower())

    def get_myth(self, name: Optional[str]) -> Optional[str]:
        """Return the myth text for ``name`` or ``None``."""
        if not name:
            return None
        return self._myth.get(name.lower())

    def names(self) -> list[str]:
        """Return every constellation covered by either table, sorted."""
        return sorted(set(self._info) | set(self._myth))


@lru_cache(maxsize=None)
def load_content_store(content_dir: Optional[Path] = None) -> JsonContentStore:
    """Return the process-wide content store, loading it on first use."""
    directory = content_dir or settings.STAR_GAZER_CONTENT_DIR or DEFAULT_CONTENT_DIR
    return JsonContentStore.from_directory(Path(directory))


__all__ = [
    "DEFAULT_CONTENT_DIR",
    "INFO_FILENAME",
    "MYTH_FILENAME",
    "JsonContentStore",
    "load_content_store",
]
