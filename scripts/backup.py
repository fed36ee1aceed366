"""Write an export document of the current snapshot to ``backups/``.

The file has the same shape as the one served by ``GET /api/export`` and can
be restored with ``POST /api/import``.
"""

from __future__ import annotations

import importlib
import json
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from attendance_tracker.common.datetime_utils import now_local
from attendance_tracker.common.logging_utils import setup_logger
from attendance_tracker.main import container_from_settings


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    logger = setup_logger("attendance_tracker", level=logging.INFO)
    container = container_from_settings(settings)

    now = now_local()
    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / container.persistence.export_filename(now)

    document = container.persistence.export_document(container.store.state, now=now)
    out_file.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(
        "OK: Backup created: %s (%d subjects, %d records)",
        out_file,
        len(document["subjects"]),
        len(document["attendanceRecords"]),
    )


if __name__ == "__main__":
    main()
