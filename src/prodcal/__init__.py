"""
prodcal: production calendars from Russian public sources.

Retrieves, for a calendar year, which days are weekends, public holidays or
shortened pre-holiday workdays, from consultant.ru, hh.ru or xmlcalendar.ru,
and normalizes them into one model.

Basic usage:
    from prodcal import CalendarRequest, Provider, Strategy, get_weekend_data

    request = CalendarRequest(2024, Provider.CONSULTANT, Strategy.SCRAPE)
    result = get_weekend_data(request)

    if result is not None:
        for month in result.months:
            print(month.name, month.weekends, month.holidays, month.pre_holidays)
        print(result.holiday_info)

Failures are reported through :mod:`logging` and turn into ``None``. Use
:func:`resolve` to get the exception instead.
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

from .config import Settings, load_settings
from .exceptions import (
    DeserializationError,
    FetchError,
    InvalidRequestError,
    MalformedPageError,
    MonthProcessingError,
    ProdCalError,
    TransportError,
    UnknownSourceError,
)
from .models import CalendarRequest, CalendarResult, MonthResult, Provider, Strategy
from .months import MonthNaming, get_naming
from .registry import (
    get_adapter,
    get_weekend_data,
    registered_providers,
    resolve,
    supports_api,
    supports_scrape,
)
from .transport import Transport, UrllibTransport

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalendarRequest",
    "CalendarResult",
    "DeserializationError",
    "FetchError",
    "InvalidRequestError",
    "MalformedPageError",
    "MonthNaming",
    "MonthProcessingError",
    "MonthResult",
    "ProdCalError",
    "Provider",
    "Settings",
    "Strategy",
    "Transport",
    "TransportError",
    "UnknownSourceError",
    "UrllibTransport",
    "__version__",
    "get_adapter",
    "get_naming",
    "get_weekend_data",
    "load_settings",
    "registered_providers",
    "resolve",
    "supports_api",
    "supports_scrape",
]
