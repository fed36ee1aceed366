from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Subject:
    """Domain entity: a subject the student attends.

    ``color`` is a display tag only; nothing in the core interprets it.
    """

    id: str
    name: str
    color: str
    created_at: datetime
