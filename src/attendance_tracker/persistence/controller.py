from __future__ import annotations

import json

from flask import Flask, Response, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    persistence = container.persistence

    @app.route("/api/export", methods=["GET"], endpoint="data_export")
    def data_export():
        now = container.clock()
        document = persistence.export_document(container.store.state, now=now)
        return Response(
            json.dumps(document, indent=2, ensure_ascii=False),
            mimetype="application/json",
            headers={"Content-Disposition": f"attachment; filename={persistence.export_filename(now)}"},
        )

    @app.route("/api/import", methods=["POST"], endpoint="data_import")
    def data_import():
        payload = request.get_json(silent=True)
        if payload is None:
            payload = request.get_data(as_text=True)
        container.store.import_data(persistence.parse_import(payload))
        container.commit()
        state = container.store.state
        return jsonify(
            ok=True,
            subjects=len(state.subjects),
            attendanceRecords=len(state.attendance_records),
        )

    @app.route("/api/reset", methods=["POST"], endpoint="data_reset")
    def data_reset():
        container.store.reset()
        container.persistence.clear()
        return jsonify(ok=True)
