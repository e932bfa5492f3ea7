from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository

_COLUMNS = "id, name, email, department, created_at, updated_at, deleted_at"


def _to_student(row: dict) -> Student:
    return Student(
        student_id=int(row["id"]),
        name=row["name"],
        email=row["email"],
        department=row["department"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, name: str, email: str, department: str, created_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(name, email, department, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, email, department, created_at, created_at),
            )
            return int(cur.lastrowid)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM students
                WHERE id=%s AND deleted_at IS NULL
                """,
                (int(student_id),),
            )
            row = fetchone(cur)
            return _to_student(row) if row else None

    def get_by_email(self, email: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM students
                WHERE email=%s AND deleted_at IS NULL
                """,
                (email,),
            )
            row = fetchone(cur)
            return _to_student(row) if row else None

    def list_page(self, *, offset: int, limit: int) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM students
                WHERE deleted_at IS NULL
                ORDER BY id ASC
                LIMIT %s OFFSET %s
                """,
                (int(limit), int(offset)),
            )
            return [_to_student(r) for r in fetchall(cur)]

    def update(
        self,
        student_id: int,
        *,
        name: Optional[str],
        email: Optional[str],
        department: Optional[str],
        updated_at: datetime,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE students
                SET name=COALESCE(%s, name),
                    email=COALESCE(%s, email),
                    department=COALESCE(%s, department),
                    updated_at=%s
                WHERE id=%s AND deleted_at IS NULL
                """,
                (name, email, department, updated_at, int(student_id)),
            )
            return cur.rowcount > 0

    def soft_delete(self, student_id: int, *, deleted_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE students
                SET deleted_at=%s, updated_at=%s
                WHERE id=%s AND deleted_at IS NULL
                """,
                (deleted_at, deleted_at, int(student_id)),
            )
            if cur.rowcount == 0:
                return False
            cur.execute(
                "UPDATE attendance_records SET student_id=NULL WHERE student_id=%s",
                (int(student_id),),
            )
            return True
