from __future__ import annotations

from datetime import datetime, timezone

from flask import Flask, jsonify

from ..common.http import json_api, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="healthcheck")
    def healthcheck():
        return jsonify({"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()})

    @app.route("/api/auth/login", methods=["POST"], endpoint="api_login")
    @json_api
    def api_login():
        data = json_body()
        user = container.auth_service.login(
            str(data.get("username") or ""),
            str(data.get("password") or ""),
            str(data.get("role") or ""),
        )
        # Failed login is a null result, not an error.
        return jsonify(user.to_dict() if user else None)

    @app.route("/api/users/<int:user_id>", methods=["GET"], endpoint="api_current_user")
    @json_api
    def api_current_user(user_id: int):
        user = container.auth_service.get_current_user(user_id)
        return jsonify(user.to_dict() if user else None)
