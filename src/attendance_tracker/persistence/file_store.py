from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from ..core.exceptions import PersistenceError
from .repository import SnapshotStore

logger = logging.getLogger(__name__)


class JsonFileStore(SnapshotStore):
    """One ``<key>.json`` file per key inside ``directory``."""

    def __init__(self, directory: str | Path):
        self._directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Failed to read %s: %s", path, e)
            raise PersistenceError(f"Cannot read snapshot {key!r}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error("Failed to write %s: %s", path, e)
            raise PersistenceError(f"Cannot save snapshot {key!r}: {e}") from e

    def remove_item(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            logger.error("Failed to remove %s: %s", self._path(key), e)
            raise PersistenceError(f"Cannot remove snapshot {key!r}: {e}") from e
