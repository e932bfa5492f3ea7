from __future__ import annotations

from typing import Any

from flask import jsonify, request

from ..core.exceptions import ValidationError
from .validators import require_positive_int


def json_error(message: str, status: int):
    return jsonify({"error": message}), status


def read_json_object() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("request body must be a JSON object")
    return data


def parse_path_id(value: str, field_name: str = "id") -> int:
    return require_positive_int(value, field_name)


def query_int(name: str) -> int | None:
    # Unparseable paging values fall back to defaults
    raw = request.args.get(name)
    try:
        return int(raw) if raw is not None else None
    except ValueError:
        return None
