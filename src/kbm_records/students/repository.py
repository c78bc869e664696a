from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import NewStudent, Student


class StudentRepository(Protocol):
    def create(self, student: NewStudent) -> Student:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def update(self, student_id: int, *, changes: Mapping[str, Any]) -> Optional[Student]:
        """Apply only the given column changes; None if the student does not exist."""

        raise NotImplementedError

    def delete(self, student_id: int) -> bool:
        raise NotImplementedError
