from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from ..attendance.model import AttendanceView
from ..attendance.service import AttendanceService
from ..core.enums import AttendanceStatus

logger = logging.getLogger(__name__)


@dataclass
class StudentWeeklySummary:
    student_id: Optional[int]
    name: str
    present: int = 0
    total: int = 0

    def format_line(self) -> str:
        return (
            f"Student {self.name} (ID: {self.student_id}) was present "
            f"{self.present}/{self.total} days this week."
        )


def build_weekly_summary(records: Iterable[AttendanceView]) -> list[StudentWeeklySummary]:
    """Group records by student and count presences.

    Only the exact `present` status counts as present; late and excused do not.
    The first name seen for a student is kept.
    """
    summary_map: dict[Optional[int], StudentWeeklySummary] = {}

    for r in records:
        s = summary_map.get(r.student_id)
        if not s:
            s = StudentWeeklySummary(student_id=r.student_id, name=r.student_name or "")
            summary_map[r.student_id] = s

        s.total += 1
        if r.status == AttendanceStatus.PRESENT:
            s.present += 1

    return list(summary_map.values())


class WeeklyReportJob:
    """Aggregate the trailing week of attendance and print one line per student."""

    def __init__(self, attendance_service: AttendanceService, *, emit: Callable[[str], None] = print):
        self._attendance_service = attendance_service
        self._emit = emit

    def run(self) -> list[StudentWeeklySummary]:
        logger.info("Starting weekly attendance report")

        try:
            records = self._attendance_service.get_weekly_attendance()
        except Exception:
            logger.exception("Error fetching weekly attendance, report aborted")
            return []

        if not records:
            logger.info("No attendance records found for the last 7 days")
            return []

        summaries = build_weekly_summary(records)
        for s in summaries:
            self._emit(s.format_line())

        logger.info("Weekly report completed (%d students)", len(summaries))
        return summaries
