from __future__ import annotations

import logging
from datetime import datetime, timedelta

from ..common.datetime_utils import now_utc
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, StudentNotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceView
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_status(value: AttendanceStatus | str | None) -> AttendanceStatus:
    """Missing status defaults to present; unknown values are rejected."""
    if isinstance(value, AttendanceStatus):
        return value
    text = str(value).strip().lower() if value is not None else ""
    if not text:
        return AttendanceStatus.PRESENT
    try:
        return AttendanceStatus(text)
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"status must be one of: {allowed}")


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        report_days: int = DEFAULT_REPORT_DAYS,
    ):
        self._attendance = attendance
        self._students = students
        self._report_days = int(report_days)

    def mark_attendance(
        self,
        student_id: int,
        *,
        date: datetime,
        status: AttendanceStatus | str | None = None,
        now: datetime | None = None,
    ) -> None:
        status = parse_status(status)

        if not self._students.get_by_id(student_id):
            raise StudentNotFoundError("student not found: cannot mark attendance")

        attendance_id = self._attendance.create(
            student_id=student_id,
            date=date,
            status=status,
            created_at=now or now_utc(),
        )
        logger.info("Marked attendance id=%s student_id=%s status=%s", attendance_id, student_id, status.value)

    def get_attendance_by_student(self, student_id: int) -> list[AttendanceView]:
        if not self._students.get_by_id(student_id):
            raise NotFoundError("student not found")

        return [AttendanceView.from_record(r) for r in self._attendance.list_for_student(student_id)]

    def get_weekly_attendance(self, *, now: datetime | None = None) -> list[AttendanceView]:
        since = (now or now_utc()) - timedelta(days=self._report_days)
        return [AttendanceView.from_record(r) for r in self._attendance.list_since(since)]
