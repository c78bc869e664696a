from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_api, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.material_service

    @app.route("/api/materials", methods=["POST"], endpoint="api_materials_create")
    @json_api
    def api_materials_create():
        data = json_body()
        material = service.create_material(data, user_id=data.get("user_id"))
        return jsonify(material.to_dict()), 201

    @app.route("/api/materials", methods=["GET"], endpoint="api_materials_list")
    @json_api
    def api_materials_list():
        return jsonify([m.to_dict() for m in service.list_materials()])

    @app.route("/api/materials/<int:material_id>", methods=["GET"], endpoint="api_materials_get")
    @json_api
    def api_materials_get(material_id: int):
        material = service.get_material(material_id)
        return jsonify(material.to_dict() if material else None)

    @app.route("/api/materials/<int:material_id>", methods=["PATCH", "PUT"], endpoint="api_materials_update")
    @json_api
    def api_materials_update(material_id: int):
        material = service.update_material(material_id, json_body())
        return jsonify(material.to_dict() if material else None)

    @app.route("/api/materials/<int:material_id>", methods=["DELETE"], endpoint="api_materials_delete")
    @json_api
    def api_materials_delete(material_id: int):
        return jsonify({"deleted": service.delete_material(material_id)})
