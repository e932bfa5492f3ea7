from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def create(
        self,
        *,
        student_id: int,
        date: datetime,
        status: AttendanceStatus,
        created_at: datetime,
    ) -> int:
        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        """Records of one student, joined with the student's name."""

        raise NotImplementedError

    def list_since(self, since: datetime) -> Sequence[AttendanceRecord]:
        """Records dated at or after `since`, joined with student names."""

        raise NotImplementedError
