from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_api, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    @app.route("/api/students", methods=["POST"], endpoint="api_students_create")
    @json_api
    def api_students_create():
        student = service.create_student(json_body())
        return jsonify(student.to_dict()), 201

    @app.route("/api/students", methods=["GET"], endpoint="api_students_list")
    @json_api
    def api_students_list():
        return jsonify([s.to_dict() for s in service.list_students()])

    @app.route("/api/students/<int:student_id>", methods=["GET"], endpoint="api_students_get")
    @json_api
    def api_students_get(student_id: int):
        student = service.get_student(student_id)
        return jsonify(student.to_dict() if student else None)

    @app.route("/api/students/<int:student_id>", methods=["PATCH", "PUT"], endpoint="api_students_update")
    @json_api
    def api_students_update(student_id: int):
        student = service.update_student(student_id, json_body())
        return jsonify(student.to_dict() if student else None)

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="api_students_delete")
    @json_api
    def api_students_delete(student_id: int):
        return jsonify({"deleted": service.delete_student(student_id)})

    @app.route("/api/students/<int:student_id>/attendance", methods=["GET"], endpoint="api_students_attendance")
    @json_api
    def api_students_attendance(student_id: int):
        rows = container.statistics_service.get_attendance_by_student(
            student_id,
            request.args.get("start") or None,
            request.args.get("end") or None,
        )
        return jsonify([r.to_dict() for r in rows])
