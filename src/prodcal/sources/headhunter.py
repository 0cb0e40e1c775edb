"""Production calendar published by HeadHunter (hh.ru)."""

from __future__ import annotations

from bs4 import Tag

from ..models import CalendarRequest, MonthResult, Provider, Strategy
from .base import PageSelectors, SourceAdapter, class_selector, element_text, first_number

#: Label hh.ru nests inside ordinary days off. Other days off are holidays.
WEEKEND_LABEL = "Выходной день"


class HeadHunterAdapter(SourceAdapter):
    """Scrapes the calendar article of hh.ru.

    Weekends and holidays share the ``_day-off`` marker; they are told apart
    by the label element nested in each day. Day cells also contain label
    text, so the day number is the first run of digits in the cell.
    """

    provider = Provider.HEADHUNTER
    default_url = "https://hh.ru/article/calendar"
    supports_api = False
    supports_scrape = True
    selectors = PageSelectors(
        months=".calendar-list__item-body:nth-child(2n+1)",
        holiday_container=".calendar-info-list",
        month_name=".calendar-list__item-title",
        holiday_item=".calendar-info-list__item",
        weekend_class="calendar-list__numbers__item calendar-list__numbers__item_day-off",
        pre_holiday_class="calendar-list__numbers__item calendar-list__numbers__item_shortened",
    )

    def url_for(self, request: CalendarRequest, strategy: Strategy) -> str:
        base = self.base_url(request, strategy)
        return f"{base.rstrip('/')}{request.year}"

    def parse_month(self, group: Tag, name: str | None) -> MonthResult:
        pre_holidays = [
            first_number(cell.get_text()) for cell in group.select(class_selector(self.selectors.pre_holiday_class))
        ]

        weekends: list[str] = []
        holidays: list[str] = []
        for cell in group.select(class_selector(self.selectors.weekend_class)):
            day = first_number(cell.get_text())
            if _is_weekend(cell):
                weekends.append(day)
            else:
                holidays.append(day)

        return MonthResult.from_name(
            name,
            naming=self.settings.naming,
            weekends=weekends,
            holidays=holidays,
            pre_holidays=pre_holidays,
        )


def _is_weekend(cell: Tag) -> bool:
    label = cell.find(True, recursive=False)
    return label is not None and element_text(label) == WEEKEND_LABEL
