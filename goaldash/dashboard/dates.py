"""Date labels for goal tables."""

from datetime import date

DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thur", "Fri", "Sat"]


def day_of_week(date_parts: tuple[int, int, int]) -> str:
    """
    Get the short weekday name for a [year, month, day] triple.

    The triple is a naive calendar date with 1-indexed month and day.

    Example:
        day_of_week((2023, 9, 9)) == "Sat"
    """
    year, month, day = date_parts
    # Python weekday: Monday=0, Sunday=6
    # Convert to: Sunday=0, Saturday=6
    return DAY_NAMES[(date(year, month, day).weekday() + 1) % 7]


def format_date(date_parts: tuple[int, int, int]) -> str:
    """Format a [year, month, day] triple as M/D/YY."""
    year, month, day = date_parts
    return f"{month}/{day}/{str(year)[-2:]}"
