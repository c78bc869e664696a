from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import KBMReport, NewKBMReport


class KBMReportRepository(Protocol):
    def create_with_attendance(self, report: NewKBMReport) -> KBMReport:
        """Insert the report and all of its attendance rows as one transaction."""

        raise NotImplementedError

    def list_all(self) -> Sequence[KBMReport]:
        raise NotImplementedError

    def list_by_user(self, user_id: int) -> Sequence[KBMReport]:
        raise NotImplementedError

    def get_by_id(self, report_id: int) -> Optional[KBMReport]:
        raise NotImplementedError

    def delete(self, report_id: int) -> bool:
        """Delete the report's attendance rows and then the report, as one transaction."""

        raise NotImplementedError
