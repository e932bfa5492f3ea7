from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Note: the service layer depends on this interface, never on a concrete DB.
    Soft-deleted students are invisible to every method.
    """

    def create(self, *, name: str, email: str, department: str, created_at: datetime) -> int:
        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Student]:
        raise NotImplementedError

    def list_page(self, *, offset: int, limit: int) -> Sequence[Student]:
        raise NotImplementedError

    def update(
        self,
        student_id: int,
        *,
        name: Optional[str],
        email: Optional[str],
        department: Optional[str],
        updated_at: datetime,
    ) -> bool:
        """Apply the non-None fields in one statement.

        Returns False when no live student matched.
        """

        raise NotImplementedError

    def soft_delete(self, student_id: int, *, deleted_at: datetime) -> bool:
        """Mark the student deleted and detach their attendance rows.

        Returns False when no live student matched.
        """

        raise NotImplementedError
