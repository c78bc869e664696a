from __future__ import annotations

from datetime import MAXYEAR, date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, Sequence

from ..common.datetime_utils import month_bounds, month_name, parse_optional_date
from ..common.validators import require_positive_int
from ..core.constants import DAYS_PER_WEEK, PERIOD_UNBOUNDED, WEEKS_PER_MONTH
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, MonthlyBreakdown, PeriodSummary, WeeklyBucket
from .repository import AttendanceRepository


def _average(total: int, count: int) -> float:
    if count <= 0:
        return 0.0
    ratio = Decimal(total) / Decimal(count)
    return float(ratio.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def week_ranges(year: int, month: int) -> list[tuple[int, date, date]]:
    """Split a month into exactly four fixed buckets.

    Buckets start on days 1, 8, 15 and 22. The first three are 7 days long;
    the last one ends on the month's last calendar day (e.g. Feb 2024: 22-29,
    Jan 2024: 22-31), so days 29-31 are counted in week 4 rather than dropped.
    This is a fixed slicing of the month, not ISO calendar weeks.
    """

    first_day, last_day = month_bounds(year, month)
    ranges = []
    for week in range(1, WEEKS_PER_MONTH + 1):
        start = first_day.replace(day=(week - 1) * DAYS_PER_WEEK + 1)
        if week == WEEKS_PER_MONTH:
            end = last_day
        else:
            end = first_day.replace(day=min(week * DAYS_PER_WEEK, last_day.day))
        ranges.append((week, start, end))
    return ranges


class StatisticsService:
    """Use case: read-only attendance statistics (both roles).

    All figures are derived from attendance rows joined to their KBM report
    date; grouping happens here so that every backend gives identical numbers.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def get_period_summary(self, start_date: Optional[str] = None, end_date: Optional[str] = None) -> PeriodSummary:
        start = parse_optional_date(start_date, "start_date")
        end = parse_optional_date(end_date, "end_date")

        rows = self._attendance.get_stat_rows(start_date=start, end_date=end)

        counts = {status: 0 for status in AttendanceStatus}
        students: set[int] = set()
        for row in rows:
            counts[row.status] += 1
            students.add(row.student_id)

        return PeriodSummary(
            total_students=len(students),
            present=counts[AttendanceStatus.PRESENT],
            sick=counts[AttendanceStatus.SICK],
            excused=counts[AttendanceStatus.EXCUSED],
            absent=counts[AttendanceStatus.ABSENT],
            period=f"{start_date or PERIOD_UNBOUNDED} - {end_date or PERIOD_UNBOUNDED}",
        )

    def get_monthly_breakdown(self, year: Any, month: Any = None) -> list[MonthlyBreakdown]:
        year = require_positive_int(year, "year")
        if year > MAXYEAR:
            raise ValidationError(f"year must be between 1 and {MAXYEAR}")
        if month is None or month == "":
            months: Sequence[int] = range(1, 13)
        else:
            month = require_positive_int(month, "month")
            if month > 12:
                raise ValidationError("month must be between 1 and 12")
            months = [month]

        return [self._breakdown_for_month(year, m) for m in months]

    def _breakdown_for_month(self, year: int, month: int) -> MonthlyBreakdown:
        first_day, last_day = month_bounds(year, month)

        total_kbm = self._attendance.count_reports(start_date=first_day, end_date=last_day)
        present_rows = self._attendance.get_stat_rows(
            start_date=first_day,
            end_date=last_day,
            status=AttendanceStatus.PRESENT,
        )

        weekly = []
        for week, start, end in week_ranges(year, month):
            in_week = [r for r in present_rows if start <= r.report_date <= end]
            weekly.append(
                WeeklyBucket(
                    week=week,
                    start_date=start,
                    end_date=end,
                    attendance_count=len(in_week),
                    total_students=len({r.student_id for r in in_week}),
                )
            )

        return MonthlyBreakdown(
            month=month_name(month),
            year=year,
            total_kbm=total_kbm,
            avg_attendance=_average(len(present_rows), total_kbm),
            weekly_data=weekly,
        )

    def get_attendance_by_student(
        self,
        student_id: int,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_student(
            int(student_id),
            start_date=parse_optional_date(start_date, "start_date"),
            end_date=parse_optional_date(end_date, "end_date"),
        )

    def get_attendance_by_report(self, report_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_report(int(report_id))

