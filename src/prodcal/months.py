"""
Month-naming conventions.

A :class:`MonthNaming` maps month numbers (1-12) to display names and back.
The providers publish Russian calendars, so the ``"ru"`` convention is the
default; ``"en"`` is available for callers that re-render results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final


@dataclass(frozen=True)
class MonthNaming:
    """Twelve month names for one locale.

    Attributes:
        locale: Short locale identifier (e.g. ``"ru"``).
        names: Month names, January first.
    """

    locale: str
    names: tuple[str, ...]
    _lookup: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.names) != 12:
            msg = f"Expected 12 month names for locale '{self.locale}', got {len(self.names)}"
            raise ValueError(msg)
        lookup = {name.casefold(): i for i, name in enumerate(self.names, 1)}
        object.__setattr__(self, "_lookup", lookup)

    def name_of(self, number: int) -> str:
        """Return the display name of month *number* (1-12)."""
        if not 1 <= number <= 12:
            msg = f"Month number must be between 1 and 12, got {number}"
            raise ValueError(msg)
        return self.names[number - 1]

    def number_of(self, name: str | None) -> int | None:
        """Return the number of the month called *name*, or ``None`` if unknown.

        Matching ignores case and surrounding whitespace.
        """
        if not name:
            return None
        return self._lookup.get(name.strip().casefold())


RUSSIAN: Final[MonthNaming] = MonthNaming(
    "ru",
    (
        "Январь",
        "Февраль",
        "Март",
        "Апрель",
        "Май",
        "Июнь",
        "Июль",
        "Август",
        "Сентябрь",
        "Октябрь",
        "Ноябрь",
        "Декабрь",
    ),
)

ENGLISH: Final[MonthNaming] = MonthNaming(
    "en",
    (
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
)

DEFAULT_LOCALE: Final[str] = "ru"

_NAMINGS: Final[dict[str, MonthNaming]] = {n.locale: n for n in (RUSSIAN, ENGLISH)}


def available_locales() -> tuple[str, ...]:
    """Return the locales with a built-in month-naming convention."""
    return tuple(sorted(_NAMINGS))


def get_naming(locale: str = DEFAULT_LOCALE) -> MonthNaming:
    """Return the built-in :class:`MonthNaming` for *locale*.

    Raises:
        ValueError: If no convention exists for *locale*.
    """
    try:
        return _NAMINGS[locale.lower()]
    except KeyError:
        msg = f"Unknown month-naming locale '{locale}'. Available: {', '.join(available_locales())}"
        raise ValueError(msg) from None
