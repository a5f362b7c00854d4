from .date import DateLike, days_in_previous_month, to_date, to_optional_date

__all__ = [
    "DateLike",
    "days_in_previous_month",
    "to_date",
    "to_optional_date",
]
