"""
Source registry and pipeline entry points.

Dispatches a :class:`~prodcal.models.CalendarRequest` to the adapter of its
provider and returns the canonical :class:`~prodcal.models.CalendarResult`.

Example::

    from prodcal import CalendarRequest, Provider, Strategy, get_weekend_data

    request = CalendarRequest(2024, Provider.XMLCALENDAR, Strategy.API)
    result = get_weekend_data(request)
    if result is not None:
        print(result.month(1).holidays)

Callers choose the strategy. Check :func:`supports_api` or
:func:`supports_scrape` first: a provider is never queried with a strategy
it does not support.
"""

from __future__ import annotations

import logging
from typing import Final

from .config import Settings, load_settings
from .exceptions import InvalidRequestError, UnknownSourceError
from .models import CalendarRequest, CalendarResult, Provider
from .sources import ConsultantAdapter, HeadHunterAdapter, SourceAdapter, XmlCalendarAdapter
from .transport import Transport

logger = logging.getLogger(__name__)

_ADAPTERS: Final[dict[Provider, type[SourceAdapter]]] = {
    Provider.CONSULTANT: ConsultantAdapter,
    Provider.HEADHUNTER: HeadHunterAdapter,
    Provider.XMLCALENDAR: XmlCalendarAdapter,
}


def registered_providers() -> tuple[Provider, ...]:
    """Return the providers that have an adapter."""
    return tuple(_ADAPTERS)


def get_adapter(provider: Provider, settings: Settings | None = None) -> SourceAdapter:
    """Create the adapter for *provider*.

    Raises:
        UnknownSourceError: If no adapter is registered for *provider*.
    """
    try:
        adapter_cls = _ADAPTERS[provider]
    except KeyError:
        raise UnknownSourceError(provider) from None
    return adapter_cls(settings)


def supports_api(provider: Provider) -> bool:
    """Check whether *provider* can be queried through a structured feed."""
    adapter_cls = _ADAPTERS.get(provider)
    return adapter_cls is not None and adapter_cls.supports_api


def supports_scrape(provider: Provider) -> bool:
    """Check whether *provider* can be queried by scraping its page."""
    adapter_cls = _ADAPTERS.get(provider)
    return adapter_cls is not None and adapter_cls.supports_scrape


def resolve(
    request: CalendarRequest | None,
    *,
    transport: Transport | None = None,
    settings: Settings | None = None,
) -> CalendarResult:
    """Retrieve the calendar for *request*, raising on failure.

    Args:
        request: What to retrieve.
        transport: Overrides the HTTP transport built from *settings*.
        settings: Runtime settings; read from the environment if omitted.

    Raises:
        InvalidRequestError: If *request* is missing or asks for a strategy
            the provider does not support.
        UnknownSourceError: If the provider has no adapter.
        ProdCalError: Any acquisition or extraction failure.
    """
    if request is None:
        raise InvalidRequestError("No request given", field="request")
    adapter = get_adapter(request.provider, settings or load_settings())
    return adapter.fetch(request, transport)


def get_weekend_data(
    request: CalendarRequest | None,
    *,
    transport: Transport | None = None,
    settings: Settings | None = None,
) -> CalendarResult | None:
    """Retrieve the calendar for *request*, or ``None`` on any failure.

    Failures are logged once, with their cause, on the ``prodcal`` loggers.
    Nothing is fetched when the request is missing, the provider is unknown
    or the provider does not support the requested strategy.
    """
    if request is None:
        logger.error("No calendar request given")
        return None

    logger.debug("%s", request.describe())

    try:
        adapter = get_adapter(request.provider, settings or load_settings())
    except UnknownSourceError as exc:
        logger.error("Data source not defined: %s", exc)
        return None
    except ValueError as exc:
        logger.error("Invalid prodcal settings: %s", exc)
        return None

    return adapter.get_data(request, transport)
