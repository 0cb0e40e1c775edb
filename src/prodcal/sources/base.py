"""Shared machinery for provider adapters."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from bs4 import Tag

from ..acquisition import ScrapedPage, scrape_page
from ..config import Settings
from ..exceptions import InvalidRequestError, MonthProcessingError, ProdCalError
from ..models import CalendarRequest, CalendarResult, MonthResult, Provider, Strategy
from ..transport import Transport

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"\d+")


@dataclass(frozen=True)
class PageSelectors:
    """Selectors and marker classes describing a provider's calendar page.

    Marker classes may list several space-separated names; an element
    matches when it carries all of them.

    Attributes:
        months: Selects one element per month.
        holiday_container: Selects the holiday-info container.
        month_name: Selects the month title inside a month group.
        holiday_item: Selects the entries inside the holiday-info container.
        weekend_class: Marker of days off.
        pre_holiday_class: Marker of shortened pre-holiday days.
        holiday_class: Marker of public holidays, when the page has one.
    """

    months: str
    holiday_container: str
    month_name: str
    holiday_item: str
    weekend_class: str
    pre_holiday_class: str
    holiday_class: str | None = None


def class_selector(class_names: str) -> str:
    """Turn ``"a b"`` into the compound selector ``".a.b"``."""
    return "".join(f".{name}" for name in class_names.split())


def has_exact_classes(element: Tag, class_names: str) -> bool:
    """Check whether *element*'s class attribute is exactly *class_names*."""
    return " ".join(element.get("class") or []) == class_names


def element_text(element: Tag) -> str:
    return element.get_text().strip()


def first_number(text: str) -> str:
    """Return the first run of digits in *text*, or ``""``."""
    match = _DIGITS.search(text or "")
    return match.group(0) if match else ""


class SourceAdapter(ABC):
    """Base class binding a provider to its acquisition strategies.

    Subclasses declare their capabilities and URLs as class attributes and
    implement :meth:`url_for` and :meth:`parse_month`. Structured-fetch
    providers also override :meth:`fetch_from_api`.

    Args:
        settings: Runtime settings; defaults are used when omitted.
    """

    provider: ClassVar[Provider]
    default_url: ClassVar[str]
    default_api_url: ClassVar[str | None] = None
    supports_api: ClassVar[bool] = False
    supports_scrape: ClassVar[bool] = True
    selectors: ClassVar[PageSelectors]

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    def supports(self, strategy: Strategy) -> bool:
        """Check whether this provider can be queried with *strategy*."""
        if strategy is Strategy.API:
            return self.supports_api
        return self.supports_scrape

    def base_url(self, request: CalendarRequest, strategy: Strategy) -> str:
        """Resolve the base URL: request override, then settings, then default.

        Raises:
            InvalidRequestError: If the resolved URL is blank.
        """
        url = request.base_url or self.settings.base_url_for(self.provider)
        if not url:
            url = self.default_api_url if strategy is Strategy.API and self.default_api_url else self.default_url
        if not url or not url.strip():
            msg = f"No base URL for {self.provider.value}"
            raise InvalidRequestError(msg, field="base_url")
        return url

    @abstractmethod
    def url_for(self, request: CalendarRequest, strategy: Strategy) -> str:
        """Build the URL fetched for *request* with *strategy*."""

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def get_data(self, request: CalendarRequest, transport: Transport | None = None) -> CalendarResult | None:
        """Retrieve the calendar, reporting any failure and returning ``None``.

        The requested strategy is authoritative: when the provider does not
        support it, nothing is fetched and ``None`` is returned.
        """
        if not self.supports(request.strategy):
            logger.warning(
                "%s does not support the %s strategy, no data retrieved",
                self.provider.value,
                request.strategy.value,
            )
            return None

        try:
            return self.fetch(request, transport)
        except ProdCalError as exc:
            logger.error(
                "Failed to get %s calendar for %d [%s]: %s",
                self.provider.value,
                request.year,
                type(exc).__name__,
                exc,
                exc_info=exc if exc.__cause__ is not None else None,
            )
        except Exception:
            logger.exception("Unexpected error while getting %s calendar for %d", self.provider.value, request.year)
        return None

    def fetch(self, request: CalendarRequest, transport: Transport | None = None) -> CalendarResult:
        """Retrieve the calendar, raising on failure.

        Raises:
            InvalidRequestError: If the provider does not support the
                requested strategy.
            ProdCalError: Any acquisition or extraction failure.
        """
        if not self.supports(request.strategy):
            msg = f"{self.provider.value} does not support the {request.strategy.value} strategy"
            raise InvalidRequestError(msg, field="strategy")

        if transport is None:
            transport = self.settings.make_transport()
        if request.strategy is Strategy.API:
            return self.fetch_from_api(request, transport)
        return self.fetch_from_page(request, transport)

    # ------------------------------------------------------------------
    # Structured fetch
    # ------------------------------------------------------------------

    def fetch_from_api(self, request: CalendarRequest, transport: Transport) -> CalendarResult:
        """Retrieve the calendar through a structured feed.

        Only providers declaring ``supports_api`` override this.
        """
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Page scrape
    # ------------------------------------------------------------------

    def fetch_from_page(self, request: CalendarRequest, transport: Transport) -> CalendarResult:
        url = self.url_for(request, Strategy.SCRAPE)
        page = scrape_page(url, transport, self.selectors.months, self.selectors.holiday_container)
        months = self.parse_page(page)
        return CalendarResult(
            year=request.year,
            months=tuple(months),
            holiday_info=self.holiday_info_from_page(page.holiday_info),
        )

    def parse_page(self, page: ScrapedPage) -> list[MonthResult]:
        """Extract every month group of *page*, in document order.

        Raises:
            MonthProcessingError: If any month cannot be processed.
        """
        results: list[MonthResult] = []
        for group in page.months:
            name: str | None = None
            try:
                name = self.month_name(group)
                results.append(self.parse_month(group, name))
            except Exception as exc:
                raise MonthProcessingError(name, page.url) from exc
        return results

    def month_name(self, group: Tag) -> str | None:
        """Return the title of a month group, or ``None`` when it has none."""
        title = group.select_one(self.selectors.month_name)
        return element_text(title) if title is not None else None

    @abstractmethod
    def parse_month(self, group: Tag, name: str | None) -> MonthResult:
        """Classify the days of one month group."""

    def holiday_info_from_page(self, info: Tag | None) -> str:
        """Join the holiday-info entries of the page, one per line."""
        if info is None:
            return ""
        return "\n".join(element_text(item) for item in info.select(self.selectors.holiday_item))
