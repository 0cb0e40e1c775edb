"""
Typed view of the xmlcalendar.ru structured document.

Layout::

    <calendar year="2024">
      <holidays>
        <holiday id="1" title="Новогодние каникулы" />
      </holidays>
      <days>
        <day d="01.01" t="1" h="1" />
        <day d="02.22" t="2" />
        <day d="04.27" t="3" />
      </days>
    </calendar>

Day type codes: ``1`` holiday, ``2`` shortened pre-holiday workday, ``3``
workday on a normally free Saturday or Sunday.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum

from .exceptions import DeserializationError

_DATE_TOKEN = re.compile(r"^\d{2}\.\d{2}$")


class DayType(IntEnum):
    """Type codes carried by ``<day t="...">``."""

    HOLIDAY = 1
    SHORT = 2
    WORKDAY = 3


@dataclass(frozen=True)
class HolidayNameRecord:
    """A named holiday (``<holiday id="" title="">``)."""

    id: int
    title: str


@dataclass(frozen=True)
class RawDayRecord:
    """An exceptional day (``<day t="" d="" h="">``).

    Attributes:
        type: Day type code (see :class:`DayType`).
        date: Raw ``MM.DD`` token, without a year.
        holiday_id: Id of the referenced :class:`HolidayNameRecord`, ``0``
            when the day references no holiday.
    """

    type: int
    date: str
    holiday_id: int = 0


@dataclass(frozen=True)
class DayInfo:
    """A day record resolved against the calendar year."""

    date: date
    type: int
    holiday_id: int = 0


@dataclass(frozen=True)
class XmlCalendar:
    """Deserialized ``<calendar>`` document."""

    year: int
    holidays: tuple[HolidayNameRecord, ...] = ()
    days: tuple[RawDayRecord, ...] = ()

    def resolve_days(self) -> list[DayInfo]:
        """Combine each day record with the calendar year.

        Dates are parsed with the exact format ``MM.dd.yyyy``. Records whose
        token does not form a valid date are dropped.
        """
        resolved: list[DayInfo] = []
        for record in self.days:
            parsed = _parse_day(record.date, self.year)
            if parsed is not None:
                resolved.append(DayInfo(date=parsed, type=record.type, holiday_id=record.holiday_id))
        return resolved


def _parse_day(token: str, year: int) -> date | None:
    if not _DATE_TOKEN.match(token):
        return None
    try:
        return datetime.strptime(f"{token}.{year:04d}", "%m.%d.%Y").date()
    except ValueError:
        return None


def parse_calendar_xml(content: str) -> XmlCalendar:
    """Deserialize an xmlcalendar.ru document.

    Args:
        content: The response body.

    Returns:
        The typed :class:`XmlCalendar`.

    Raises:
        DeserializationError: If the body is empty, is not well-formed XML,
            or does not follow the calendar layout.
    """
    if not content or not content.strip():
        raise DeserializationError("empty document")

    try:
        root = ET.fromstring(content.strip())
    except ET.ParseError as exc:
        raise DeserializationError(str(exc)) from exc

    if root.tag != "calendar":
        msg = f"unexpected root element <{root.tag}>"
        raise DeserializationError(msg)

    year_attr = root.get("year")
    try:
        year = int(year_attr) if year_attr is not None else None
    except ValueError:
        year = None
    if year is None or year <= 0:
        msg = f"invalid calendar year {year_attr!r}"
        raise DeserializationError(msg)

    holidays = tuple(
        HolidayNameRecord(id=_byte(node, "id"), title=node.get("title", ""))
        for node in root.iterfind("holidays/holiday")
    )
    days = tuple(
        RawDayRecord(
            type=_byte(node, "t"),
            date=node.get("d", ""),
            holiday_id=_byte(node, "h", default=0),
        )
        for node in root.iterfind("days/day")
    )
    return XmlCalendar(year=year, holidays=holidays, days=days)


def _byte(node: ET.Element, attr: str, default: int | None = None) -> int:
    """Read an unsigned byte attribute."""
    raw = node.get(attr)
    if raw is None:
        if default is None:
            msg = f"<{node.tag}> is missing attribute '{attr}'"
            raise DeserializationError(msg)
        return default
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if not 0 <= value <= 255:
        msg = f"<{node.tag}> attribute '{attr}' is not a byte: {raw!r}"
        raise DeserializationError(msg)
    return value
