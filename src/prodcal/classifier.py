"""Day classification for structured calendar documents.

The structured feed only lists exceptional days. Ordinary weekends are
computed from the calendar and reconciled with those records:

* type ``2`` records are pre-holiday days,
* type ``1`` records are holidays, whatever weekday they fall on,
* Saturdays and Sundays are weekends unless a type ``3`` record turns them
  into workdays.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable, Iterator
from datetime import date, timedelta

from .exceptions import MonthProcessingError
from .models import MonthResult
from .months import MonthNaming
from .schema import DayInfo, DayType, XmlCalendar

_SATURDAY = 5
_SUNDAY = 6


def days_between(start: date, end: date) -> Iterator[date]:
    """Yield every date from *start* up to, but excluding, *end*."""
    current = start
    while current < end:
        yield current
        current += timedelta(days=1)


def weekends_in_month(year: int, month: int) -> Iterator[date]:
    """Yield the Saturdays and Sundays of a month."""
    start = date(year, month, 1)
    end = start + timedelta(days=calendar.monthrange(year, month)[1])
    return (d for d in days_between(start, end) if d.weekday() in (_SATURDAY, _SUNDAY))


def classify_month(year: int, month: int, days: Iterable[DayInfo], *, naming: MonthNaming) -> MonthResult:
    """Build the :class:`MonthResult` for *month* from resolved day records."""
    month_days = [d for d in days if d.date.month == month]

    pre_holidays = [str(d.date.day) for d in month_days if d.type == DayType.SHORT]
    holidays = [str(d.date.day) for d in month_days if d.type == DayType.HOLIDAY]
    workdays = {d.date for d in month_days if d.type == DayType.WORKDAY}
    weekends = [str(d.day) for d in weekends_in_month(year, month) if d not in workdays]

    return MonthResult.from_number(
        month,
        naming=naming,
        weekends=weekends,
        holidays=holidays,
        pre_holidays=pre_holidays,
    )


def classify_year(document: XmlCalendar, *, naming: MonthNaming) -> list[MonthResult]:
    """Classify all twelve months of a structured document, January first.

    Raises:
        MonthProcessingError: If any month cannot be classified.
    """
    days = document.resolve_days()
    months: list[MonthResult] = []
    for month in range(1, 13):
        try:
            months.append(classify_month(document.year, month, days, naming=naming))
        except Exception as exc:
            raise MonthProcessingError(naming.name_of(month)) from exc
    return months


def describe_holidays(document: XmlCalendar) -> str:
    """Render the holiday names with the dates that reference them.

    Each line reads ``"<MM.DD>, <MM.DD> - <title>"``. Holidays no day refers
    to are left out, as are day references to unknown holiday ids.
    """
    lines: list[str] = []
    for holiday in document.holidays:
        # h="0" means the day references no holiday
        dates = [d.date for d in document.days if d.holiday_id and d.holiday_id == holiday.id]
        if not dates:
            continue
        lines.append(f"{', '.join(dates)} - {holiday.title}")
    return "\n".join(lines).rstrip()
