from typing import Final

MS_PER_DAY: Final[int] = 1000 * 60 * 60 * 24

MONTH_NAMES: Final[tuple[str, ...]] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Sunday-first, as in the rendered grid header
WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

PDF_FILENAME_SUFFIX: Final[str] = "-tracker.pdf"

MISSING_FIELDS_MESSAGE: Final[str] = "Please fill in all fields"
END_BEFORE_START_MESSAGE: Final[str] = "End date must be after start date"
RANGE_TOO_LONG_MESSAGE: Final[str] = "Date range is too long (maximum {max_days} days)"

# Legend example box shown in the header (day number / date / remaining)
LEGEND_EXAMPLE: Final[tuple[int, int, int]] = (1, 23, 69)
