from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import SUBJECT_COLORS
from ..persistence.codec import encode_subject


def register(app: Flask, container: Container) -> None:
    @app.route("/api/subjects", methods=["GET"], endpoint="subjects_list")
    def subjects_list():
        return jsonify(
            subjects=[encode_subject(s) for s in container.store.state.subjects],
            colors=list(SUBJECT_COLORS),
        )

    @app.route("/api/subjects", methods=["POST"], endpoint="subjects_create")
    def subjects_create():
        data = request.get_json(silent=True) or {}
        subject = container.store.add_subject(
            str(data.get("name") or ""),
            str(data.get("color") or SUBJECT_COLORS[0]),
        )
        container.commit()
        return jsonify(encode_subject(subject)), 201

    @app.route("/api/subjects/<subject_id>", methods=["DELETE"], endpoint="subjects_delete")
    def subjects_delete(subject_id: str):
        container.store.remove_subject(subject_id)
        container.commit()
        return jsonify(ok=True)
