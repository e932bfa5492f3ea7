from __future__ import annotations

from flask import Flask, jsonify

from ..common.http_utils import json_error, parse_path_id, query_int, read_json_object
from ..core.exceptions import ConflictError, NotFoundError, StorageError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/students", methods=["POST"], endpoint="create_student")
    def create_student():
        try:
            data = read_json_object()
            student = container.student_service.create_student(
                name=data.get("name"),
                email=data.get("email"),
                department=data.get("department"),
            )
            return jsonify(student.to_dict()), 201
        except (ValidationError, ConflictError) as e:
            return json_error(str(e), 400)
        except StorageError as e:
            return json_error(str(e), 500)

    @app.route("/students", methods=["GET"], endpoint="list_students")
    def list_students():
        try:
            students = container.student_service.list_students(query_int("page"), query_int("limit"))
            return jsonify([s.to_dict() for s in students]), 200
        except StorageError as e:
            return json_error(str(e), 500)

    @app.route("/students/<student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: str):
        try:
            student = container.student_service.get_student(parse_path_id(student_id))
            return jsonify(student.to_dict()), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except StorageError as e:
            return json_error(str(e), 500)

    @app.route("/students/<student_id>", methods=["PUT"], endpoint="update_student")
    def update_student(student_id: str):
        try:
            sid = parse_path_id(student_id)
            data = read_json_object()
            student = container.student_service.update_student(
                sid,
                name=data.get("name"),
                email=data.get("email"),
                department=data.get("department"),
            )
            return jsonify(student.to_dict()), 200
        except (ValidationError, ConflictError) as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except StorageError as e:
            return json_error(str(e), 500)

    @app.route("/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: str):
        try:
            container.student_service.delete_student(parse_path_id(student_id))
            return "", 204
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except StorageError as e:
            return json_error(str(e), 500)
