from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..persistence.codec import decode_timetable_document, encode_timetable


def register(app: Flask, container: Container) -> None:
    def _timetable_view() -> dict:
        store = container.store
        out = encode_timetable(store.state.timetable)
        # Names resolved for display: "Free Period" / "Unknown Subject".
        for ds in out["schedule"]:
            for slot in ds["timeSlots"]:
                slot["subjectName"] = store.subject_name(slot.get("subjectId"))
                slot["color"] = store.subject_color(slot.get("subjectId"))
        return out

    @app.route("/api/timetable", methods=["GET"], endpoint="timetable_get")
    def timetable_get():
        return jsonify(_timetable_view())

    @app.route("/api/timetable", methods=["PUT"], endpoint="timetable_replace")
    def timetable_replace():
        timetable = decode_timetable_document(request.get_json(silent=True))
        container.store.update_timetable(timetable)
        container.commit()
        return jsonify(_timetable_view())

    @app.route("/api/timetable/<day>/slots/<slot_id>", methods=["PUT"], endpoint="timetable_assign")
    def timetable_assign(day: str, slot_id: str):
        data = request.get_json(silent=True) or {}
        container.store.assign_subject_to_slot(day, slot_id, data.get("subjectId") or None)
        container.commit()
        return jsonify(_timetable_view())
