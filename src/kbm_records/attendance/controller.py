from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_api
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.statistics_service

    @app.route("/api/stats/summary", methods=["GET"], endpoint="api_stats_summary")
    @json_api
    def api_stats_summary():
        summary = service.get_period_summary(
            request.args.get("start") or None,
            request.args.get("end") or None,
        )
        return jsonify(summary.to_dict())

    @app.route("/api/stats/monthly", methods=["GET"], endpoint="api_stats_monthly")
    @json_api
    def api_stats_monthly():
        breakdown = service.get_monthly_breakdown(
            request.args.get("year"),
            request.args.get("month") or None,
        )
        return jsonify([m.to_dict() for m in breakdown])
