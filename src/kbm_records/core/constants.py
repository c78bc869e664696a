"""Constants and defaults."""

# Label used for an unbounded side of a period summary.
PERIOD_UNBOUNDED = "N/A"

WEEKS_PER_MONTH = 4
DAYS_PER_WEEK = 7

DEFAULT_DATE_FORMAT = "%Y-%m-%d"

# Indexed by date.weekday() (Monday == 0).
DAY_NAMES = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
