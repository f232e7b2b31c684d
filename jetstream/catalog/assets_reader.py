# assets_reader.py
"""
Low-level access to the bundled JSON assets.

Only this module touches the file system; the repository asks it for parsed
documents by file name.
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Any

from jetstream.settings import ASSETS_DIR


class CatalogLoadError(Exception):
    """A bundled asset is missing or is not valid JSON."""


class AssetsReader:
    """Reads JSON documents from one assets directory."""

    def __init__(self, assets_dir: Path | None = None) -> None:
        self.assets_dir = Path(assets_dir) if assets_dir else ASSETS_DIR

    def path_for(self, name: str) -> Path:
        return self.assets_dir / name

    def read_json(self, name: str) -> Any:
        """
        Parse *name* from the assets directory.

        Raises
        ------
        CatalogLoadError
            If the file cannot be read or decoded.
        """
        path = self.path_for(name)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogLoadError(f"Cannot read asset {path}: {e}") from e
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Malformed asset {path}: {e}") from e

    def read_list(self, name: str) -> list[dict[str, Any]]:
        """Like `read_json` but insists on a top-level JSON array of objects."""
        data = self.read_json(name)
        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            raise CatalogLoadError(f"Asset {name} must be a list of objects")
        return data

    def read_mapping(self, name: str) -> dict[str, Any]:
        data = self.read_json(name)
        if not isinstance(data, dict):
            raise CatalogLoadError(f"Asset {name} must be a JSON object")
        return data
