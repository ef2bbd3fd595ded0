"""
Identifier catalog: maps the 32-character application identifier embedded in a
capture filename to a human-readable name.
"""
import json
import logging
from pathlib import Path
from types import MappingProxyType
from collections.abc import Mapping
from typing import Iterator, Optional

from . import config
from .exceptions import CatalogError


class Catalog(Mapping[str, str]):
    """Read-only identifier -> display name table."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, identifier: str) -> str:
        return self._entries[identifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} entries)"

    def resolve(self, identifier: str) -> str:
        return resolve_name(identifier, self)


def resolve_name(identifier: str, catalog: Mapping[str, str]) -> str:
    """Exact, case-sensitive lookup. Falls back to config.UNKNOWN_NAME."""
    return catalog.get(identifier, config.UNKNOWN_NAME)


def load_catalog(path: Path) -> Catalog:
    """
    Loads a flat JSON object of identifier -> name pairs.

    Raises:
        CatalogError: if the file is missing, not valid JSON, or not a flat
                      string-to-string object.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"Catalog {path} must be a JSON object, got {type(data).__name__}")

    for key, value in data.items():
        if not isinstance(value, str):
            raise CatalogError(f"Catalog entry {key!r} has a non-string name: {value!r}")
        if len(key) != config.IDENTIFIER_LENGTH:
            # Such keys can never match a filename; keep them but say so.
            logging.debug(f"Catalog key {key!r} is not {config.IDENTIFIER_LENGTH} characters long")

    logging.info(f"Loaded {len(data)} catalog entries from {path}")
    return Catalog(data)
