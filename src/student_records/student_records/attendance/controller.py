from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_datetime
from ..common.http_utils import json_error, parse_path_id, read_json_object
from ..common.validators import require_int_field
from ..core.exceptions import NotFoundError, StorageError, StudentNotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        try:
            data = read_json_object()
            student_id = require_int_field(data.get("student_id"), "student_id")

            raw_date = data.get("date")
            if not isinstance(raw_date, str) or not raw_date.strip():
                raise ValidationError("date is required")
            try:
                date = parse_iso_datetime(raw_date)
            except ValueError:
                raise ValidationError("date must be an ISO-8601 timestamp")

            container.attendance_service.mark_attendance(student_id, date=date, status=data.get("status"))
            return "", 201
        except (ValidationError, StudentNotFoundError) as e:
            # Missing referenced student is a bad request, not a missing resource
            return json_error(str(e), 400)
        except StorageError as e:
            return json_error(str(e), 500)

    @app.route("/attendance/<student_id>", methods=["GET"], endpoint="attendance_by_student")
    def attendance_by_student(student_id: str):
        try:
            records = container.attendance_service.get_attendance_by_student(parse_path_id(student_id, "student id"))
            return jsonify([r.to_dict() for r in records]), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except StorageError as e:
            return json_error(str(e), 500)
