from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import coerce_date, weekday_name
from ..container import Container
from ..core.exceptions import ValidationError
from ..persistence.codec import encode_record


def register(app: Flask, container: Container) -> None:
    ledger = container.attendance_service
    store = container.store

    def _record_view(record) -> dict:
        return {**encode_record(record), "subjectName": store.subject_name(record.subject_id)}

    def _day_view(date_value) -> dict:
        on_date = coerce_date(date_value)
        day = weekday_name(on_date)
        slots = []
        for slot in ledger.scheduled_slots(day):
            record = ledger.get_record(on_date, slot.id)
            slots.append(
                {
                    "timeSlotId": slot.id,
                    "startTime": slot.start_time.strftime("%H:%M"),
                    "endTime": slot.end_time.strftime("%H:%M"),
                    "subjectId": slot.subject_id,
                    "subjectName": store.subject_name(slot.subject_id),
                    "status": record.status.value if record else None,
                }
            )
        return {
            "date": on_date.isoformat(),
            "day": day,
            "slots": slots,
            "records": [_record_view(r) for r in ledger.records_for_date(on_date)],
        }

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_day")
    def attendance_day():
        return jsonify(_day_view(request.args.get("date") or container.clock().date()))

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    def attendance_history():
        out = []
        for on_date, records in ledger.records_by_date():
            day_stats = container.statistics_service.for_date(on_date)
            out.append(
                {
                    **day_stats.to_dict(),
                    "records": [_record_view(r) for r in records],
                }
            )
        return jsonify(history=out)

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_mark")
    def attendance_mark():
        data = request.get_json(silent=True) or {}
        slot_id = data.get("timeSlotId")
        subject_id = data.get("subjectId")
        if not slot_id or not subject_id:
            raise ValidationError("timeSlotId and subjectId are required")

        record = ledger.mark_attendance(
            data.get("date") or container.clock().date(),
            data.get("day"),
            str(slot_id),
            str(subject_id),
            data.get("status") or "",
        )
        container.commit()
        return jsonify(_record_view(record))

    @app.route("/api/attendance/<date_value>/<slot_id>", methods=["DELETE"], endpoint="attendance_clear")
    def attendance_clear(date_value: str, slot_id: str):
        removed = ledger.clear_attendance(date_value, slot_id)
        if removed:
            container.commit()
        return jsonify(ok=True, removed=removed)

    @app.route("/api/attendance/<date_value>/all", methods=["POST"], endpoint="attendance_mark_all")
    def attendance_mark_all(date_value: str):
        data = request.get_json(silent=True) or {}
        count = ledger.mark_all_day_attendance(date_value, data.get("day"), data.get("status") or "")
        if count:
            container.commit()
        return jsonify(count=count, **_day_view(date_value))
