from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from attendance_tracker.common.logging_utils import setup_logger
from attendance_tracker.database.bootstrap import apply_schema, list_tables
from attendance_tracker.database.connection import DBConfig, DatabaseConnection, describe


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    logger = setup_logger("attendance_tracker", level=logging.INFO)

    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))
    apply_schema(conn)
    tables = list_tables(conn)
    logger.info("OK: Applied schema.sql -> %s (tables=%d)", describe(conn.config), len(tables))


if __name__ == "__main__":
    main()
