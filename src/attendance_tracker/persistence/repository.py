from __future__ import annotations

from typing import Optional, Protocol


class SnapshotStore(Protocol):
    """Durable key-value store holding serialized snapshots.

    Note (DIP): PersistenceService depends on this interface, not on a
    concrete backend. Implementations raise PersistenceError on failure.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError
