"""Production calendar published by xmlcalendar.ru.

The only provider with a structured feed. Its HTML page marks holidays and
weekends with the same class, so scraped results never list holidays; use
the API strategy to get them.
"""

from __future__ import annotations

import logging

from bs4 import Tag

from ..acquisition import XML_CONTENT_TYPE, fetch_structured
from ..classifier import classify_year, describe_holidays
from ..models import CalendarRequest, CalendarResult, MonthResult, Provider, Strategy
from ..schema import parse_calendar_xml
from ..transport import Transport
from .base import PageSelectors, SourceAdapter, class_selector, element_text

logger = logging.getLogger(__name__)


class XmlCalendarAdapter(SourceAdapter):
    """Reads xmlcalendar.ru through its XML feed or its HTML page."""

    provider = Provider.XMLCALENDAR
    default_url = "http://xmlcalendar.ru/html.php?y="
    default_api_url = "http://xmlcalendar.ru/data/ru/"
    supports_api = True
    supports_scrape = True
    selectors = PageSelectors(
        months=".pcal-month",
        holiday_container=".pcal-holidays-container",
        month_name=".pcal-month-name",
        holiday_item="li",
        weekend_class="pcal-day pcal-day-holiday",
        pre_holiday_class="pcal-day pcal-day-short",
    )

    def url_for(self, request: CalendarRequest, strategy: Strategy) -> str:
        base = self.base_url(request, strategy)
        if strategy is Strategy.API:
            return f"{base.rstrip('/')}/{request.year}/calendar.xml"
        # The page URL ends with a query parameter, the year is appended as-is
        return f"{base}{request.year}"

    def fetch_from_api(self, request: CalendarRequest, transport: Transport) -> CalendarResult:
        url = self.url_for(request, Strategy.API)
        document = fetch_structured(url, transport, parse_calendar_xml, accept=XML_CONTENT_TYPE)
        if document.year != request.year:
            logger.warning("Requested %d but %s describes %d", request.year, url, document.year)

        months = classify_year(document, naming=self.settings.naming)
        return CalendarResult(
            year=request.year,
            months=tuple(months),
            holiday_info=describe_holidays(document),
        )

    def parse_month(self, group: Tag, name: str | None) -> MonthResult:
        pre_holidays = [element_text(cell) for cell in group.select(class_selector(self.selectors.pre_holiday_class))]
        weekends = [element_text(cell) for cell in group.select(class_selector(self.selectors.weekend_class))]
        return MonthResult.from_name(
            name,
            naming=self.settings.naming,
            weekends=weekends,
            holidays=(),
            pre_holidays=pre_holidays,
        )
