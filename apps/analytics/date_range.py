import re
from dataclasses import dataclass
from datetime import date, timedelta

from django.conf import settings
from django.utils import timezone
from django.utils.dateparse import parse_date

from .exceptions import InvalidRangeError

ISO_DATE = re.compile(r'^\d{4}-\d{2}-\d{2}$')


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-date window."""
    start: date
    end: date

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def __contains__(self, day) -> bool:
        return self.start <= day <= self.end

    def previous_year(self) -> 'DateRange':
        """Same calendar window one year earlier.

        Both bounds move back a calendar year, Feb 29 landing on Feb 28, so
        the spans differ only when a leap day falls in one of the windows.
        """
        return DateRange(shift_years(self.start, -1), shift_years(self.end, -1))

    def as_dict(self) -> dict:
        return {'from': self.start.isoformat(), 'to': self.end.isoformat()}


def shift_years(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return day.replace(year=day.year + years, day=28)


def parse_iso_date(value: str, field: str) -> date:
    parsed = None
    if ISO_DATE.match(value):
        try:
            parsed = parse_date(value)
        except ValueError:
            parsed = None
    if parsed is None:
        raise InvalidRangeError(f"{field} must be a valid YYYY-MM-DD date, got {value!r}")
    return parsed


def resolve_date_range(from_date=None, to_date=None, today=None) -> DateRange:
    """Turn optional ``fromDate``/``toDate`` strings into a concrete window.

    With neither bound the window is the trailing ``KIRK_DEFAULT_RANGE_DAYS``
    days ending today. Supplying only one bound, a malformed date or an
    inverted range raises InvalidRangeError.
    """
    from_date = from_date or None
    to_date = to_date or None

    if from_date is None and to_date is None:
        end = today or timezone.localdate()
        days = getattr(settings, 'KIRK_DEFAULT_RANGE_DAYS', 30)
        return DateRange(end - timedelta(days=days), end)

    if from_date is None or to_date is None:
        raise InvalidRangeError('fromDate and toDate must be supplied together')

    start = parse_iso_date(from_date, 'fromDate')
    end = parse_iso_date(to_date, 'toDate')
    if start > end:
        raise InvalidRangeError(f"fromDate {start} is after toDate {end}")
    return DateRange(start, end)
