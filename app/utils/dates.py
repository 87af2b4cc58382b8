"""Calendar date parsing and whole-year age arithmetic."""
from datetime import date, datetime

def parse_date(value: str) -> date | None:
    """Parse an ISO date (``YYYY-MM-DD``) or ISO datetime string.

    Returns None when the string is not a real calendar date.
    """
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None

def is_date_in_future(value: date, today: date | None = None) -> bool:
    return value > (today or date.today())

def age_difference_in_years(earlier: date, later: date) -> int:
    """Whole years elapsed from ``earlier`` to ``later``.

    The anniversary counts as reached on the same month/day.
    """
    years = later.year - earlier.year
    if (later.month, later.day) < (earlier.month, earlier.day):
        years -= 1
    return years
