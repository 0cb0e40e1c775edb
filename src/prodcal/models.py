"""
Canonical calendar model and request value types.

Every source adapter reduces its input to the same shape::

    CalendarResult(year, months=(MonthResult, ...), holiday_info)

where each :class:`MonthResult` carries three lists of day-of-month tokens
(weekends, holidays, pre-holiday shortened days). Tokens are kept as text
because sources render them differently and callers may re-render them.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

from .exceptions import InvalidRequestError
from .months import MonthNaming, get_naming


class Provider(Enum):
    """External publishers of production calendars."""

    UNDEFINED = "undefined"
    CONSULTANT = "consultant"
    HEADHUNTER = "headhunter"
    XMLCALENDAR = "xmlcalendar"


class Strategy(Enum):
    """How a calendar is acquired from its provider."""

    API = "api"
    """Fetch a structured document and deserialize it."""
    SCRAPE = "scrape"
    """Load an HTML page and query it by selector."""


@dataclass(frozen=True)
class CalendarRequest:
    """Parameters for one calendar lookup.

    Validated on construction; an invalid request raises
    :class:`~prodcal.exceptions.InvalidRequestError` before any network
    access can happen.

    Attributes:
        year: Calendar year to retrieve.
        provider: Which publisher to query. String values are coerced.
        strategy: Requested acquisition strategy. String values are coerced.
        base_url: Optional override of the provider's base URL.
    """

    year: int
    provider: Provider
    strategy: Strategy = Strategy.SCRAPE
    base_url: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.year, bool) or not isinstance(self.year, int) or self.year <= 0:
            msg = f"Year must be a positive integer, got {self.year!r}"
            raise InvalidRequestError(msg, field="year")

        object.__setattr__(self, "provider", _coerce(Provider, self.provider, "provider"))
        object.__setattr__(self, "strategy", _coerce(Strategy, self.strategy, "strategy"))

        if self.base_url is not None and (not isinstance(self.base_url, str) or not self.base_url.strip()):
            msg = "Base URL override must be a non-empty string"
            raise InvalidRequestError(msg, field="base_url")

    def describe(self) -> str:
        """One-line summary used in diagnostics."""
        url = self.base_url or "<default>"
        return f"Requesting {self.provider.value} data ({self.strategy.value}). URL: {url}. Year {self.year}."


def _coerce(enum_cls: type[Provider] | type[Strategy], value: object, field_name: str) -> Provider | Strategy:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        msg = f"Invalid {field_name} {value!r}. Expected one of: {allowed}"
        raise InvalidRequestError(msg, field=field_name) from None


@dataclass(frozen=True)
class MonthResult:
    """Day classification for a single month.

    The month is identified by a display ``name`` and a ``number`` (1-12).
    The two are kept consistent by the derivation constructors
    :meth:`from_number` and :meth:`from_name`; use :meth:`with_number` or
    :meth:`with_name` to re-identify a month (the last one applied wins).
    ``number`` is ``None`` when a scraped name is not recognised by the
    month-naming convention.
    """

    name: str | None
    number: int | None
    weekends: tuple[str, ...] = ()
    holidays: tuple[str, ...] = ()
    pre_holidays: tuple[str, ...] = ()

    @classmethod
    def from_number(
        cls,
        number: int,
        *,
        naming: MonthNaming | None = None,
        weekends: Iterable[str] = (),
        holidays: Iterable[str] = (),
        pre_holidays: Iterable[str] = (),
    ) -> MonthResult:
        """Create a month identified by number, deriving its name."""
        naming = naming or get_naming()
        return cls(
            name=naming.name_of(number),
            number=number,
            weekends=tuple(weekends),
            holidays=tuple(holidays),
            pre_holidays=tuple(pre_holidays),
        )

    @classmethod
    def from_name(
        cls,
        name: str | None,
        *,
        naming: MonthNaming | None = None,
        weekends: Iterable[str] = (),
        holidays: Iterable[str] = (),
        pre_holidays: Iterable[str] = (),
    ) -> MonthResult:
        """Create a month identified by display name, deriving its number."""
        naming = naming or get_naming()
        return cls(
            name=name,
            number=naming.number_of(name),
            weekends=tuple(weekends),
            holidays=tuple(holidays),
            pre_holidays=tuple(pre_holidays),
        )

    def with_number(self, number: int, *, naming: MonthNaming | None = None) -> MonthResult:
        """Return a copy renumbered to *number*, with the matching name."""
        naming = naming or get_naming()
        return replace(self, number=number, name=naming.name_of(number))

    def with_name(self, name: str | None, *, naming: MonthNaming | None = None) -> MonthResult:
        """Return a copy renamed to *name*, with the matching number."""
        naming = naming or get_naming()
        return replace(self, name=name, number=naming.number_of(name))


@dataclass(frozen=True)
class CalendarResult:
    """Weekend, holiday and pre-holiday data for one year.

    Attributes:
        year: The requested year.
        months: Month entries, January first for structured documents or in
            page order for scraped calendars.
        holiday_info: Free-text description of the year's holidays.
    """

    year: int
    months: tuple[MonthResult, ...]
    holiday_info: str = ""

    def month(self, number: int) -> MonthResult | None:
        """Return the entry for month *number*, or ``None`` if absent."""
        for m in self.months:
            if m.number == number:
                return m
        return None
