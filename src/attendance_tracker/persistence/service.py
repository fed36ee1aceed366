from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Optional, Union

from ..common.datetime_utils import now_local
from ..common.validators import require_keys
from ..core.constants import SNAPSHOT_VERSION, STORAGE_KEY
from ..core.exceptions import FormatError, PersistenceError
from ..store.state import AppState
from .codec import decode_state, encode_state
from .repository import SnapshotStore

logger = logging.getLogger(__name__)


class PersistenceService:
    """Save boundary between the in-memory state and a durable store.

    The stored envelope is ``{"state": {...}, "version": 0}`` under a single
    namespaced key. Export documents are the bare state plus ``exportDate``.
    """

    def __init__(self, backend: SnapshotStore, *, key: str = STORAGE_KEY):
        self._backend = backend
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> Optional[AppState]:
        raw = self._backend.get_item(self._key)
        if raw is None:
            return None
        try:
            envelope = json.loads(raw)
            require_keys(envelope, ("state",), what="snapshot")
            return decode_state(envelope["state"])
        except (ValueError, FormatError) as e:
            # A snapshot we cannot read must not be silently replaced on next save.
            logger.error("Stored snapshot %s is corrupt: %s", self._key, e)
            raise PersistenceError(f"Stored snapshot {self._key!r} is corrupt: {e}") from e

    def save(self, state: AppState) -> None:
        payload = json.dumps({"state": encode_state(state), "version": SNAPSHOT_VERSION}, ensure_ascii=False)
        self._backend.set_item(self._key, payload)
        logger.debug("Saved snapshot %s (%d bytes)", self._key, len(payload))

    def clear(self) -> None:
        self._backend.remove_item(self._key)

    @staticmethod
    def export_document(state: AppState, *, now: Optional[datetime] = None) -> dict:
        now = now or now_local()
        return {**encode_state(state), "exportDate": now.isoformat()}

    @staticmethod
    def export_filename(now: Optional[datetime] = None) -> str:
        now = now or now_local()
        return f"student-app-backup-{now.strftime('%Y-%m-%d')}.json"

    @staticmethod
    def parse_import(payload: Union[str, bytes, dict, Any]) -> dict:
        """Turn an uploaded document into a mapping for EntityStore.import_data."""
        if isinstance(payload, (str, bytes)):
            try:
                payload = json.loads(payload)
            except ValueError as e:
                raise FormatError(f"Invalid JSON document: {e}") from e
        return dict(require_keys(payload, ("subjects", "timetable", "attendanceRecords")))
