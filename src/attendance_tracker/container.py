from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import STORAGE_KEY
from .database.connection import DBConfig, DatabaseConnection, describe
from .persistence.file_store import JsonFileStore
from .persistence.mysql_store import MySQLSnapshotStore
from .persistence.repository import SnapshotStore
from .persistence.service import PersistenceService
from .projection.model import ProjectionConfig
from .projection.service import ProjectionService
from .statistics.service import StatisticsService
from .store.service import EntityStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: EntityStore
    persistence: PersistenceService

    attendance_service: AttendanceService
    statistics_service: StatisticsService
    projection_service: ProjectionService

    conn: Optional[DatabaseConnection] = None
    clock: Callable[[], datetime] = now_local

    def commit(self) -> None:
        """Persist the full current state. Called after every successful mutation."""
        self.persistence.save(self.store.state)


def build_backend(
    *,
    storage_backend: str,
    data_dir: str | Path = "data",
    db_config: Optional[dict] = None,
) -> tuple[SnapshotStore, Optional[DatabaseConnection]]:
    if storage_backend == "mysql":
        conn = DatabaseConnection(DBConfig.from_dict(db_config or {}))
        logger.info("Using MySQL snapshot store %s", describe(conn.config))
        return MySQLSnapshotStore(conn), conn
    if storage_backend == "file":
        logger.info("Using JSON snapshot store in %s", data_dir)
        return JsonFileStore(data_dir), None
    raise ValueError(f"Unknown STORAGE_BACKEND: {storage_backend!r}")


def build_container(
    *,
    storage_backend: str = "file",
    data_dir: str | Path = "data",
    storage_key: str = STORAGE_KEY,
    db_config: Optional[dict] = None,
    projection: Optional[ProjectionConfig] = None,
    backend: Optional[SnapshotStore] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    conn = None
    if backend is None:
        backend, conn = build_backend(storage_backend=storage_backend, data_dir=data_dir, db_config=db_config)

    persistence = PersistenceService(backend, key=storage_key)
    state = persistence.load()
    if state is None:
        logger.info("No snapshot under %s, starting with the default timetable", storage_key)

    store = EntityStore(state, clock=clock)
    statistics_service = StatisticsService(store, clock=clock)

    return Container(
        store=store,
        persistence=persistence,
        attendance_service=AttendanceService(store),
        statistics_service=statistics_service,
        projection_service=ProjectionService(store, statistics_service, config=projection),
        conn=conn,
        clock=clock,
    )
