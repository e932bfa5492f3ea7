from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(row: dict) -> AttendanceRecord:
    student_id = row.get("student_id")
    return AttendanceRecord(
        attendance_id=int(row["id"]),
        student_id=int(student_id) if student_id is not None else None,
        date=row["date"],
        status=AttendanceStatus(row["status"]),
        student_name=row.get("student_name"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        student_id: int,
        date: datetime,
        status: AttendanceStatus,
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(student_id, date, status, created_at)
                VALUES(%s,%s,%s,%s)
                """,
                (int(student_id), date, status.value, created_at),
            )
            return int(cur.lastrowid)

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT ar.id, ar.student_id, ar.date, ar.status, s.name AS student_name
                FROM attendance_records ar
                LEFT JOIN students s ON s.id = ar.student_id
                WHERE ar.student_id=%s
                ORDER BY ar.date ASC, ar.id ASC
                """,
                (int(student_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_since(self, since: datetime) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT ar.id, ar.student_id, ar.date, ar.status, s.name AS student_name
                FROM attendance_records ar
                LEFT JOIN students s ON s.id = ar.student_id
                WHERE ar.date >= %s
                ORDER BY ar.date ASC, ar.id ASC
                """,
                (since,),
            )
            return [_to_record(r) for r in fetchall(cur)]
