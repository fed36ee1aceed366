"""Wire format for snapshots and export documents.

Keys are camelCase so documents exported by earlier versions of the app
import unchanged. Dates travel as ISO-8601 text and wall-clock times as
``HH:MM``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_clock, parse_clock, parse_iso_date, parse_timestamp
from ..common.validators import require_keys
from ..core.enums import AttendanceStatus
from ..core.exceptions import FormatError
from ..store.state import AppState
from ..subjects.model import Subject
from ..timetable.model import DaySchedule, TimeSlot, Timetable

STATE_KEYS = ("subjects", "timetable", "attendanceRecords")


def encode_subject(subject: Subject) -> dict:
    return {
        "id": subject.id,
        "name": subject.name,
        "color": subject.color,
        "createdAt": subject.created_at.isoformat(),
    }


def encode_timetable(timetable: Timetable) -> dict:
    schedule = []
    for ds in timetable.schedule:
        slots = []
        for slot in ds.time_slots:
            item = {
                "id": slot.id,
                "startTime": format_clock(slot.start_time),
                "endTime": format_clock(slot.end_time),
            }
            if slot.subject_id:
                item["subjectId"] = slot.subject_id
            slots.append(item)
        schedule.append({"day": ds.day, "timeSlots": slots})
    return {"schedule": schedule}


def encode_record(record: AttendanceRecord) -> dict:
    return {
        "date": record.date.isoformat(),
        "day": record.day,
        "timeSlotId": record.time_slot_id,
        "subjectId": record.subject_id,
        "status": record.status.value,
    }


def encode_state(state: AppState) -> dict:
    return {
        "subjects": [encode_subject(s) for s in state.subjects],
        "timetable": encode_timetable(state.timetable),
        "attendanceRecords": [encode_record(r) for r in state.attendance_records],
    }


def decode_subject(raw: Mapping[str, Any]) -> Subject:
    return Subject(
        id=str(raw["id"]),
        name=str(raw["name"]),
        color=str(raw.get("color") or ""),
        created_at=parse_timestamp(raw["createdAt"]),
    )


def decode_timetable(raw: Mapping[str, Any]) -> Timetable:
    schedule = []
    for ds in raw["schedule"]:
        slots = tuple(
            TimeSlot(
                id=str(s["id"]),
                start_time=parse_clock(s["startTime"]),
                end_time=parse_clock(s["endTime"]),
                subject_id=str(s["subjectId"]) if s.get("subjectId") else None,
            )
            for s in ds["timeSlots"]
        )
        schedule.append(DaySchedule(day=str(ds["day"]), time_slots=slots))
    return Timetable(schedule=tuple(schedule))


def decode_record(raw: Mapping[str, Any]) -> AttendanceRecord:
    value = raw["date"]
    if isinstance(value, datetime):
        record_date = value.date()
    elif isinstance(value, date):
        record_date = value
    else:
        record_date = parse_iso_date(str(value))
    return AttendanceRecord(
        date=record_date,
        day=str(raw["day"]),
        time_slot_id=str(raw["timeSlotId"]),
        subject_id=str(raw["subjectId"]),
        status=AttendanceStatus(raw["status"]),
    )


def decode_state(document: Any) -> AppState:
    """Build a fresh AppState from a snapshot or export document.

    Raises FormatError when a collection is missing or an entry cannot be
    decoded. Nothing outside the returned object is touched.
    """
    require_keys(document, STATE_KEYS)
    try:
        return AppState(
            subjects=[decode_subject(s) for s in document["subjects"]],
            timetable=decode_timetable(document["timetable"]),
            attendance_records=[decode_record(r) for r in document["attendanceRecords"]],
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise FormatError(f"Invalid document: {e}") from e


def decode_timetable_document(document: Any) -> Timetable:
    require_keys(document, ("schedule",), what="timetable")
    try:
        return decode_timetable(document)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise FormatError(f"Invalid timetable: {e}") from e
