"""Date helpers shared by the domain records and the planner."""
from datetime import date, datetime, timedelta
from typing import Any, List, Optional

from kondate.utilities.constants import DATE_FORMAT, WEEKDAY_LABELS


def parse_date(value: Any) -> Optional[date]:
    """Accept a date, a datetime or an ISO string ('YYYY-MM-DD' or full timestamp)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.strptime(text[:10], DATE_FORMAT).date()
        except ValueError:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    raise ValueError(f"Unsupported date value: {value!r}")


def format_date(value: Optional[date]) -> str:
    return value.strftime(DATE_FORMAT) if value else ""


def weekday_label(value: date) -> str:
    """Sunday-first weekday label (date.weekday() is Monday-first)."""
    return WEEKDAY_LABELS[(value.weekday() + 1) % 7]


def inclusive_days(start: date, end: date) -> int:
    return (end - start).days + 1


def date_range(start: date, end: date) -> List[date]:
    return [start + timedelta(days=i) for i in range(inclusive_days(start, end))]
