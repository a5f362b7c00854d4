from typing import Optional, Union
from datetime import datetime, date
from dateutil.relativedelta import relativedelta
from pandas import Timestamp

from vaddilib.config import COMPACT_FMT, DATE_FMT

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or Timestamp to a plain date (time-of-day dropped).
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like.strip(), fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def to_optional_date(date_like: Optional[DateLike]) -> Optional[date]:
    """Like to_date, but None and blank strings map to None."""
    if date_like is None:
        return None
    if isinstance(date_like, str) and not date_like.strip():
        return None
    return to_date(date_like)


def days_in_previous_month(date_like: DateLike) -> int:
    """
    Number of days in the calendar month before the month of 'date_like'.
    """
    dt = to_date(date_like)
    last_of_previous = dt.replace(day=1) - relativedelta(days=1)
    return last_of_previous.day
