from __future__ import annotations

from functools import wraps
from typing import Any, Mapping

from flask import current_app, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError


def json_body() -> Mapping[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def json_api(view):
    """Map domain errors to JSON responses.

    ValidationError -> 400, NotFoundError -> 404, anything else -> 500 with a
    generic message (details go to the log only).
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            current_app.logger.exception("Unhandled error in %s %s", request.method, request.path)
            return jsonify({"error": "Internal server error"}), 500

    return wrapper