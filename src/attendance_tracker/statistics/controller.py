from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .service import status_level


def register(app: Flask, container: Container) -> None:
    stats = container.statistics_service

    @app.route("/api/stats", methods=["GET"], endpoint="stats_summary")
    def stats_summary():
        monthly = request.args.get("scope") == "monthly"
        subject_id = request.args.get("subjectId")

        if subject_id:
            result = stats.for_subject(subject_id, monthly=monthly)
        elif monthly:
            result = stats.monthly()
        else:
            result = stats.overall()

        return jsonify(
            scope="monthly" if monthly else "overall",
            subjectId=subject_id,
            level=status_level(result.percentage).value,
            **result.to_dict(),
        )

    @app.route("/api/stats/date/<date_value>", methods=["GET"], endpoint="stats_for_date")
    def stats_for_date(date_value: str):
        return jsonify(stats.for_date(date_value).to_dict())

    @app.route("/api/stats/subjects", methods=["GET"], endpoint="stats_subjects")
    def stats_subjects():
        monthly = request.args.get("scope") == "monthly"
        return jsonify(subjects=[row.to_dict() for row in stats.subject_breakdown(monthly=monthly)])

