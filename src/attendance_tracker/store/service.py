from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.constants import FREE_PERIOD, FREE_PERIOD_COLOR, UNKNOWN_SUBJECT
from ..persistence.codec import decode_state
from ..subjects.model import Subject
from ..timetable.model import Timetable
from .state import AppState

logger = logging.getLogger(__name__)


class EntityStore:
    """Owns subjects, the weekly timetable and the attendance ledger.

    Mutators only touch memory. Saving is the caller's job, after each
    successful mutation.
    """

    def __init__(
        self,
        state: Optional[AppState] = None,
        *,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ):
        self._state = state or AppState()
        self._clock = clock
        self._id_factory = id_factory

    @property
    def state(self) -> AppState:
        return self._state

    def snapshot(self) -> AppState:
        return self._state.copy()

    # ------------------------------------------------------------------
    # Subjects
    # ------------------------------------------------------------------
    def add_subject(self, name: str, color: str) -> Subject:
        name = require_non_empty(name, "Subject name")
        subject = Subject(id=self._id_factory(), name=name, color=color, created_at=self._clock())
        self._state.subjects = [*self._state.subjects, subject]
        logger.info("Added subject %s (%s)", subject.id, subject.name)
        return subject

    def remove_subject(self, subject_id: str) -> None:
        if self.get_subject(subject_id) is None:
            logger.debug("remove_subject: unknown subject %s", subject_id)
            return

        self._state.subjects = [s for s in self._state.subjects if s.id != subject_id]
        # Records keep pointing at the removed id; only the timetable is cleaned.
        self._state.timetable = Timetable(
            schedule=tuple(
                replace(
                    ds,
                    time_slots=tuple(
                        replace(slot, subject_id=None) if slot.subject_id == subject_id else slot
                        for slot in ds.time_slots
                    ),
                )
                for ds in self._state.timetable.schedule
            )
        )
        logger.info("Removed subject %s", subject_id)

    def get_subject(self, subject_id: Optional[str]) -> Optional[Subject]:
        if not subject_id:
            return None
        for s in self._state.subjects:
            if s.id == subject_id:
                return s
        return None

    def subject_name(self, subject_id: Optional[str]) -> str:
        if not subject_id:
            return FREE_PERIOD
        subject = self.get_subject(subject_id)
        return subject.name if subject else UNKNOWN_SUBJECT

    def subject_color(self, subject_id: Optional[str]) -> str:
        subject = self.get_subject(subject_id)
        return subject.color if subject else FREE_PERIOD_COLOR

    # ------------------------------------------------------------------
    # Timetable
    # ------------------------------------------------------------------
    def assign_subject_to_slot(self, day: str, time_slot_id: str, subject_id: Optional[str]) -> None:
        day_schedule = self._state.timetable.day(day)
        if day_schedule is None:
            logger.debug("assign_subject_to_slot: unknown day %s", day)
            return
        if day_schedule.slot(time_slot_id) is None:
            logger.debug("assign_subject_to_slot: unknown slot %s on %s", time_slot_id, day)
            return
        if subject_id and self.get_subject(subject_id) is None:
            logger.debug("assign_subject_to_slot: unknown subject %s", subject_id)
            return

        new_subject_id = subject_id or None
        updated = replace(
            day_schedule,
            time_slots=tuple(
                replace(slot, subject_id=new_subject_id) if slot.id == time_slot_id else slot
                for slot in day_schedule.time_slots
            ),
        )
        self._state.timetable = self._state.timetable.replace_day(updated)
        logger.info("Slot %s/%s -> %s", day, time_slot_id, new_subject_id or "free")

    def update_timetable(self, timetable: Timetable) -> None:
        self._state.timetable = timetable
        logger.info("Timetable replaced (%d days)", len(timetable.schedule))

    # ------------------------------------------------------------------
    # Whole-state operations
    # ------------------------------------------------------------------
    def import_data(self, bundle: Mapping[str, Any]) -> None:
        """Replace the whole state from an exported document.

        Decoding finishes before the state is swapped, so a FormatError leaves
        the current state untouched.
        """
        new_state = decode_state(bundle)
        self._state = new_state
        logger.info(
            "Imported %d subjects, %d records",
            len(new_state.subjects),
            len(new_state.attendance_records),
        )

    def reset(self) -> None:
        self._state = AppState()
        logger.info("All data cleared")
