from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

from src.student_records.student_records.attendance.model import AttendanceRecord
from src.student_records.student_records.container import wire
from src.student_records.student_records.core.enums import AttendanceStatus
from src.student_records.student_records.students.model import Student


class InMemoryStudents:
    def __init__(self):
        self._rows: dict[int, Student] = {}
        self._id = 0
        self.on_delete = []

    def create(self, *, name: str, email: str, department: str, created_at: datetime) -> int:
        self._id += 1
        self._rows[self._id] = Student(
            student_id=self._id,
            name=name,
            email=email,
            department=department,
            created_at=created_at,
            updated_at=created_at,
        )
        return self._id

    def get_by_id(self, student_id: int) -> Optional[Student]:
        s = self._rows.get(student_id)
        return s if s and s.deleted_at is None else None

    def get_by_email(self, email: str) -> Optional[Student]:
        for s in self._rows.values():
            if s.email == email and s.deleted_at is None:
                return s
        return None

    def list_page(self, *, offset: int, limit: int):
        live = [s for s in sorted(self._rows.values(), key=lambda s: s.student_id) if s.deleted_at is None]
        return live[offset : offset + limit]

    def update(self, student_id: int, *, name, email, department, updated_at: datetime) -> bool:
        s = self.get_by_id(student_id)
        if not s:
            return False
        self._rows[student_id] = replace(
            s,
            name=name if name is not None else s.name,
            email=email if email is not None else s.email,
            department=department if department is not None else s.department,
            updated_at=updated_at,
        )
        return True

    def soft_delete(self, student_id: int, *, deleted_at: datetime) -> bool:
        s = self.get_by_id(student_id)
        if not s:
            return False
        self._rows[student_id] = replace(s, deleted_at=deleted_at, updated_at=deleted_at)
        for callback in self.on_delete:
            callback(student_id)
        return True

    def raw(self, student_id: int) -> Optional[Student]:
        return self._rows.get(student_id)


class InMemoryAttendance:
    def __init__(self, students: InMemoryStudents):
        self._students = students
        self._rows: list[AttendanceRecord] = []
        students.on_delete.append(self._detach)

    def _detach(self, student_id: int) -> None:
        self._rows = [replace(r, student_id=None) if r.student_id == student_id else r for r in self._rows]

    def _with_name(self, r: AttendanceRecord) -> AttendanceRecord:
        s = self._students.raw(r.student_id) if r.student_id is not None else None
        return replace(r, student_name=s.name if s else None)

    def create(self, *, student_id: int, date: datetime, status: AttendanceStatus, created_at: datetime) -> int:
        rec = AttendanceRecord(attendance_id=len(self._rows) + 1, student_id=student_id, date=date, status=status)
        self._rows.append(rec)
        return rec.attendance_id

    def list_for_student(self, student_id: int):
        rows = [r for r in self._rows if r.student_id == student_id]
        rows.sort(key=lambda r: (r.date, r.attendance_id))
        return [self._with_name(r) for r in rows]

    def list_since(self, since: datetime):
        rows = [r for r in self._rows if r.date >= since]
        rows.sort(key=lambda r: (r.date, r.attendance_id))
        return [self._with_name(r) for r in rows]

    def count(self) -> int:
        return len(self._rows)

    def all(self) -> list[AttendanceRecord]:
        return list(self._rows)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 19, 9, 0, 0)


@pytest.fixture
def students_repo() -> InMemoryStudents:
    return InMemoryStudents()


@pytest.fixture
def attendance_repo(students_repo: InMemoryStudents) -> InMemoryAttendance:
    return InMemoryAttendance(students_repo)


@pytest.fixture
def container(students_repo, attendance_repo):
    return wire(students_repo=students_repo, attendance_repo=attendance_repo)


@pytest.fixture
def client(container, monkeypatch):
    from src.student_records.student_records.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container, start_scheduler=False)
    return app.test_client()
