from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_api, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    @app.route("/api/reports", methods=["POST"], endpoint="api_reports_create")
    @json_api
    def api_reports_create():
        data = json_body()
        report = service.create_report(data, user_id=data.get("user_id"))
        return jsonify(report.to_dict()), 201

    @app.route("/api/reports", methods=["GET"], endpoint="api_reports_list")
    @json_api
    def api_reports_list():
        user_id = request.args.get("user_id", type=int)
        return jsonify([r.to_dict() for r in service.list_reports(user_id=user_id)])

    @app.route("/api/reports/<int:report_id>", methods=["GET"], endpoint="api_reports_get")
    @json_api
    def api_reports_get(report_id: int):
        report = service.get_report(report_id)
        return jsonify(report.to_dict() if report else None)

    @app.route("/api/reports/<int:report_id>", methods=["DELETE"], endpoint="api_reports_delete")
    @json_api
    def api_reports_delete(report_id: int):
        return jsonify({"deleted": service.delete_report(report_id)})

    @app.route("/api/reports/<int:report_id>/attendance", methods=["GET"], endpoint="api_reports_attendance")
    @json_api
    def api_reports_attendance(report_id: int):
        rows = container.statistics_service.get_attendance_by_report(report_id)
        return jsonify([r.to_dict() for r in rows])
