from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    Note: Plain data object (no database access code).
    """

    student_id: int
    name: str
    email: str
    department: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


@dataclass(frozen=True)
class StudentView:
    """What the HTTP layer returns for a student."""

    id: int
    name: str
    email: str
    department: str
    created_at: datetime

    @classmethod
    def from_student(cls, student: Student) -> "StudentView":
        return cls(
            id=student.student_id,
            name=student.name,
            email=student.email,
            department=student.department,
            created_at=student.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "department": self.department,
            "created_at": self.created_at.isoformat(),
        }
