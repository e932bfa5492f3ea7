from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_utc
from ..common.validators import optional_non_empty, require_email, require_non_empty
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..core.exceptions import ConflictError, NotFoundError
from .model import StudentView
from .repository import StudentRepository

logger = logging.getLogger(__name__)


def page_to_offset(page: Optional[int], page_size: Optional[int]) -> tuple[int, int]:
    """Normalize 1-based paging into (offset, limit)."""
    page = page if page and page > 0 else DEFAULT_PAGE
    page_size = page_size if page_size and page_size > 0 else DEFAULT_PAGE_SIZE
    return (page - 1) * page_size, page_size


class StudentService:
    """Use cases: create, list, read, patch and soft-delete students."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def create_student(
        self,
        *,
        name: Optional[str],
        email: Optional[str],
        department: Optional[str],
        now: datetime | None = None,
    ) -> StudentView:
        name = require_non_empty(name, "name")
        email = require_email(email)
        department = require_non_empty(department, "department")

        if self._students.get_by_email(email):
            raise ConflictError("email already exists")

        student_id = self._students.create(
            name=name,
            email=email,
            department=department,
            created_at=now or now_utc(),
        )
        logger.info("Created student id=%s", student_id)
        return self.get_student(student_id)

    def list_students(self, page: Optional[int] = None, page_size: Optional[int] = None) -> list[StudentView]:
        offset, limit = page_to_offset(page, page_size)
        return [StudentView.from_student(s) for s in self._students.list_page(offset=offset, limit=limit)]

    def get_student(self, student_id: int) -> StudentView:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("student not found")
        return StudentView.from_student(student)

    def update_student(
        self,
        student_id: int,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        department: Optional[str] = None,
        now: datetime | None = None,
    ) -> StudentView:
        if not self._students.get_by_id(student_id):
            raise NotFoundError("student not found")

        name = optional_non_empty(name)
        department = optional_non_empty(department)
        email = optional_non_empty(email)
        if email is not None:
            email = require_email(email)
            owner = self._students.get_by_email(email)
            if owner and owner.student_id != student_id:
                raise ConflictError("email already exists")

        updated = self._students.update(
            student_id,
            name=name,
            email=email,
            department=department,
            updated_at=now or now_utc(),
        )
        if not updated:
            raise NotFoundError("student not found")

        logger.info("Updated student id=%s", student_id)
        return self.get_student(student_id)

    def delete_student(self, student_id: int, *, now: datetime | None = None) -> None:
        if not self._students.soft_delete(student_id, deleted_at=now or now_utc()):
            raise NotFoundError("student not found")
        logger.info("Soft-deleted student id=%s", student_id)
