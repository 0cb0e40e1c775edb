"""Production calendar published by ConsultantPlus (consultant.ru)."""

from __future__ import annotations

from bs4 import Tag

from ..models import CalendarRequest, MonthResult, Provider, Strategy
from .base import PageSelectors, SourceAdapter, class_selector, element_text, has_exact_classes


class ConsultantAdapter(SourceAdapter):
    """Scrapes the yearly calendar tables of consultant.ru.

    Each month is a ``table.cal``. Day cells carry ``weekend`` for ordinary
    days off and ``holiday weekend`` for public holidays; shortened days are
    marked ``preholiday`` and rendered with a trailing asterisk.
    """

    provider = Provider.CONSULTANT
    default_url = "https://www.consultant.ru/law/ref/calendar/proizvodstvennye/"
    supports_api = False
    supports_scrape = True
    selectors = PageSelectors(
        months=".cal",
        holiday_container="blockquote:first-of-type",
        month_name=".month:first-of-type",
        holiday_item="p",
        weekend_class="weekend",
        pre_holiday_class="preholiday",
        holiday_class="holiday weekend",
    )

    def url_for(self, request: CalendarRequest, strategy: Strategy) -> str:
        base = self.base_url(request, strategy)
        return f"{base.rstrip('/')}/{request.year}"

    def parse_month(self, group: Tag, name: str | None) -> MonthResult:
        pre_holidays = [
            element_text(cell).strip("*") for cell in group.select(class_selector(self.selectors.pre_holiday_class))
        ]

        # Weekday header cells share the weekend marker
        days_off = group.select(f"td{class_selector(self.selectors.weekend_class)}")
        weekends = [element_text(cell) for cell in days_off if has_exact_classes(cell, self.selectors.weekend_class)]
        holidays = [
            element_text(cell) for cell in days_off if has_exact_classes(cell, self.selectors.holiday_class or "")
        ]

        return MonthResult.from_name(
            name,
            naming=self.settings.naming,
            weekends=weekends,
            holidays=holidays,
            pre_holidays=pre_holidays,
        )
