from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    projection_service = container.projection_service

    @app.route("/api/projection", methods=["GET"], endpoint="projection")
    def projection():
        raw_targets = request.args.getlist("target")
        try:
            targets = [float(t) for t in raw_targets] or None
        except ValueError:
            raise ValidationError("target must be a number")
        if targets and any(t < 0 or t > 100 for t in targets):
            raise ValidationError("target must be between 0 and 100")

        return jsonify(projection_service.monthly_projection(targets).to_dict())
