from __future__ import annotations

from datetime import date

import pytest

from kbm_records.attendance.service import week_ranges
from kbm_records.core.exceptions import ValidationError


@pytest.fixture
def file_report(container, teacher):
    def _file(report_date: str, *entries):
        return container.report_service.create_report(
            {
                "report_date": report_date,
                "teacher_name": "Guru Pengajar 0001",
                "topic": "Materi",
                "attendances": [{"student_id": sid, "status": status} for sid, status in entries],
            },
            user_id=teacher.user_id,
        )

    return _file


@pytest.fixture
def two_students(make_student):
    return make_student(full_name="Student One"), make_student(full_name="Student Two")


def test_period_summary_counts_statuses_in_range(container, file_report, two_students):
    s1, s2 = (s.student_id for s in two_students)
    file_report("2024-01-15", (s1, "Hadir"), (s2, "Hadir"))
    file_report("2024-01-22", (s1, "Hadir"), (s2, "Sakit"))
    file_report("2024-02-05", (s1, "Izin"))

    summary = container.statistics_service.get_period_summary("2024-01-01", "2024-01-31")

    assert summary.total_students == 2
    assert summary.present == 3
    assert summary.sick == 1
    assert summary.excused == 0
    assert summary.absent == 0
    assert summary.period == "2024-01-01 - 2024-01-31"


def test_period_summary_without_bounds(container, file_report, two_students):
    s1, s2 = (s.student_id for s in two_students)
    file_report("2024-01-15", (s1, "Hadir"), (s2, "Tidak Hadir/Alfa"))
    file_report("2024-02-05", (s1, "Izin"))

    summary = container.statistics_service.get_period_summary()

    assert summary.to_dict() == {
        "total_students": 2,
        "present": 1,
        "sick": 0,
        "excused": 1,
        "absent": 1,
        "period": "N/A - N/A",
    }


def test_period_summary_bounds_are_inclusive(container, file_report, two_students):
    s1, _ = (s.student_id for s in two_students)
    file_report("2024-01-01", (s1, "Hadir"))
    file_report("2024-01-31", (s1, "Hadir"))

    summary = container.statistics_service.get_period_summary("2024-01-01", "2024-01-31")

    assert summary.present == 2
    assert summary.total_students == 1


def test_period_summary_with_one_open_side(container, file_report, two_students):
    s1, s2 = (s.student_id for s in two_students)
    file_report("2024-01-15", (s1, "Hadir"))
    file_report("2024-02-05", (s2, "Sakit"))

    summary = container.statistics_service.get_period_summary(start_date="2024-02-01")

    assert summary.total_students == 1
    assert summary.sick == 1
    assert summary.present == 0
    assert summary.period == "2024-02-01 - N/A"


def test_period_summary_with_no_rows_is_all_zero(container):
    summary = container.statistics_service.get_period_summary("2024-01-01", "2024-01-31")

    assert summary.total_students == 0
    assert (summary.present, summary.sick, summary.excused, summary.absent) == (0, 0, 0, 0)


def test_period_summary_rejects_malformed_dates(container):
    with pytest.raises(ValidationError):
        container.statistics_service.get_period_summary("2024/01/01")


def test_monthly_breakdown_for_single_month(container, file_report, two_students):
    s1, s2 = (s.student_id for s in two_students)
    file_report("2024-01-15", (s1, "Hadir"), (s2, "Hadir"))
    file_report("2024-01-22", (s1, "Hadir"), (s2, "Sakit"))
    file_report("2024-02-05", (s1, "Izin"))

    [january] = container.statistics_service.get_monthly_breakdown(2024, 1)

    assert january.month == "January"
    assert january.year == 2024
    assert january.total_kbm == 2
    assert january.total_sessions == 2
    assert january.avg_attendance == 1.5
    assert [(w.week, w.attendance_count, w.total_students) for w in january.weekly_data] == [
        (1, 0, 0),
        (2, 0, 0),
        (3, 2, 2),
        (4, 1, 1),
    ]


def test_monthly_breakdown_rounds_average_to_two_places(container, file_report, two_students):
    s1, s2 = (s.student_id for s in two_students)
    file_report("2024-03-04", (s1, "Hadir"), (s2, "Hadir"))
    file_report("2024-03-11", (s1, "Sakit"))
    file_report("2024-03-18", (s1, "Hadir"))

    [march] = container.statistics_service.get_monthly_breakdown(2024, 3)

    assert march.total_kbm == 3
    assert march.avg_attendance == 1.0
    file_report("2024-03-25", (s2, "Hadir"))
    [march] = container.statistics_service.get_monthly_breakdown(2024, 3)
    assert march.avg_attendance == 1.0

    file_report("2024-03-26")
    file_report("2024-03-27")
    [march] = container.statistics_service.get_monthly_breakdown(2024, 3)
    # 4 present rows over 6 sessions
    assert march.avg_attendance == 0.67


def test_monthly_breakdown_for_empty_month(container):
    [june] = container.statistics_service.get_monthly_breakdown(2024, 6)

    assert june.month == "June"
    assert june.total_kbm == 0
    assert june.avg_attendance == 0
    assert len(june.weekly_data) == 4
    assert all(w.attendance_count == 0 and w.total_students == 0 for w in june.weekly_data)


def test_monthly_breakdown_for_whole_year_is_ordered(container):
    months = container.statistics_service.get_monthly_breakdown(2024)

    assert len(months) == 12
    assert [m.month for m in months] == [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ]
    assert all(len(m.weekly_data) == 4 for m in months)


def test_february_leap_year_last_week_ends_on_29th(container, file_report, two_students):
    s1, _ = (s.student_id for s in two_students)
    file_report("2024-02-29", (s1, "Hadir"))

    result = container.statistics_service.get_monthly_breakdown(2024, 2)

    assert len(result) == 1
    february = result[0]
    assert february.month == "February"
    week4 = february.weekly_data[3]
    assert (week4.start_date, week4.end_date) == (date(2024, 2, 22), date(2024, 2, 29))
    assert week4.attendance_count == 1
    assert week4.total_students == 1


def test_week_ranges_follow_month_length():
    assert [(s.day, e.day) for _, s, e in week_ranges(2023, 2)] == [(1, 7), (8, 14), (15, 21), (22, 28)]
    assert [(s.day, e.day) for _, s, e in week_ranges(2024, 1)] == [(1, 7), (8, 14), (15, 21), (22, 31)]


def test_weekly_bucket_counts_only_present_rows(container, file_report, two_students):
    s1, s2 = (s.student_id for s in two_students)
    file_report("2024-05-02", (s1, "Hadir"), (s2, "Izin"))
    file_report("2024-05-06", (s1, "Hadir"), (s2, "Hadir"))

    [may] = container.statistics_service.get_monthly_breakdown(2024, 5)

    week1 = may.weekly_data[0]
    assert week1.attendance_count == 3
    assert week1.total_students == 2


@pytest.mark.parametrize("year, month", [(2024, 0), (2024, 13), (None, 1), ("abc", None), (10000, 1)])
def test_monthly_breakdown_rejects_bad_arguments(container, year, month):
    with pytest.raises(ValidationError):
        container.statistics_service.get_monthly_breakdown(year, month)


def test_attendance_by_student_filters_on_report_date(container, file_report, two_students):
    s1, s2 = (s.student_id for s in two_students)
    file_report("2024-01-15", (s1, "Hadir"), (s2, "Hadir"))
    file_report("2024-02-05", (s1, "Izin"))

    all_rows = container.statistics_service.get_attendance_by_student(s1)
    january = container.statistics_service.get_attendance_by_student(s1, "2024-01-01", "2024-01-31")

    assert len(all_rows) == 2
    assert len(january) == 1
    assert container.statistics_service.get_attendance_by_student(999) == []
