from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: attendance record.

    `student_id` is None once the student has been deleted.
    """

    attendance_id: int
    student_id: Optional[int]
    date: datetime
    status: AttendanceStatus
    student_name: Optional[str] = None


@dataclass(frozen=True)
class AttendanceView:
    """What the HTTP layer and the weekly report consume."""

    id: int
    student_id: Optional[int]
    date: datetime
    status: AttendanceStatus
    student_name: Optional[str] = None

    @classmethod
    def from_record(cls, record: AttendanceRecord) -> "AttendanceView":
        return cls(
            id=record.attendance_id,
            student_id=record.student_id,
            date=record.date,
            status=record.status,
            student_name=record.student_name or None,
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.id,
            "student_id": self.student_id,
            "date": self.date.isoformat(),
            "status": self.status.value,
        }
        if self.student_name:
            out["student_name"] = self.student_name
        return out
