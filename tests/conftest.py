"""Shared fixtures for prodcal tests."""

from __future__ import annotations

import pytest

from prodcal import Settings
from prodcal.exceptions import TransportError
from prodcal.months import RUSSIAN

MONTH_NAMES = RUSSIAN.names


class FakeTransport:
    """In-memory transport returning canned bodies keyed by URL."""

    def __init__(self, pages: dict[str, str] | None = None, *, default: str | None = None) -> None:
        self.pages = dict(pages or {})
        self.default = default
        self.calls: list[tuple[str, str | None]] = []

    def fetch(self, url: str, *, accept: str | None = None) -> str:
        self.calls.append((url, accept))
        if url in self.pages:
            return self.pages[url]
        if self.default is not None:
            return self.default
        raise TransportError(url, "404 (Not Found)")


# ---------------------------------------------------------------------------
# Page builders
# ---------------------------------------------------------------------------


def consultant_page(month_count: int = 12) -> str:
    """A consultant.ru-style page.

    Every month has day 1 as a holiday, day 3 as a shortened day and days 6
    and 7 as ordinary weekends.
    """
    tables = []
    for i in range(month_count):
        name = MONTH_NAMES[i % 12]
        tables.append(
            f"""
            <table class="cal">
              <thead>
                <tr><th class="month" colspan="7">{name}</th></tr>
                <tr><th>Пн</th><th>Вт</th><th>Ср</th><th>Чт</th><th>Пт</th>
                    <th class="weekend">Сб</th><th class="weekend">Вс</th></tr>
              </thead>
              <tbody>
                <tr>
                  <td class="holiday weekend">1</td>
                  <td>2</td>
                  <td class="preholiday">3*</td>
                  <td>4</td>
                  <td>5</td>
                  <td class="weekend">6</td>
                  <td class="weekend">7</td>
                </tr>
              </tbody>
            </table>"""
        )
    return f"""<html><body>
        <h1>Производственный календарь</h1>
        <blockquote>
          <p>1, 2, 3, 4, 5, 6 и 8 января - Новогодние каникулы</p>
          <p>7 января - Рождество Христово</p>
        </blockquote>
        <blockquote><p>Примечание</p></blockquote>
        {"".join(tables)}
    </body></html>"""


def headhunter_page(month_count: int = 12) -> str:
    """An hh.ru-style page.

    Month bodies sit at odd positions, separated by info blocks. Day 1 is a
    holiday, day 6 a weekend and day 7 a shortened day.
    """
    items = []
    for i in range(month_count):
        name = MONTH_NAMES[i % 12]
        items.append(
            f"""
            <div class="calendar-list__item-body">
              <div class="calendar-list__item-title">{name}</div>
              <ul class="calendar-list__numbers">
                <li class="calendar-list__numbers__item calendar-list__numbers__item_day-off">1
                  <div class="calendar-list__numbers__item-label">Праздник</div></li>
                <li class="calendar-list__numbers__item">2</li>
                <li class="calendar-list__numbers__item calendar-list__numbers__item_day-off">
                  6 <div class="calendar-list__numbers__item-label">Выходной день</div></li>
                <li class="calendar-list__numbers__item calendar-list__numbers__item_shortened">
                  7 (сокращенный) <div class="calendar-list__numbers__item-label">Предпраздничный день</div></li>
              </ul>
            </div>
            <div class="calendar-list__item-body calendar-list__item-body_info">Норма часов</div>"""
        )
    return f"""<html><body>
        <div class="calendar-list">{"".join(items)}</div>
        <ul class="calendar-info-list">
          <li class="calendar-info-list__item">1 января - Новый год</li>
          <li class="calendar-info-list__item">23 февраля - День защитника Отечества</li>
        </ul>
    </body></html>"""


def xmlcalendar_page(month_count: int = 12) -> str:
    """An xmlcalendar.ru-style page. Days 1 and 6 are off, day 7 is short."""
    months = []
    for i in range(month_count):
        name = MONTH_NAMES[i % 12]
        months.append(
            f"""
            <div class="pcal-month">
              <div class="pcal-month-name">{name}</div>
              <div class="pcal-day pcal-day-holiday">1</div>
              <div class="pcal-day">2</div>
              <div class="pcal-day pcal-day-holiday">6</div>
              <div class="pcal-day pcal-day-short"> 7 </div>
            </div>"""
        )
    return f"""<html><body>
        <div class="pcal">{"".join(months)}</div>
        <div class="pcal-holidays-container">
          <ul><li>1 января - Новый год</li><li>8 марта - Международный женский день</li></ul>
        </div>
    </body></html>"""


def calendar_xml(year: int = 2024, holidays: str = "", days: str = "") -> str:
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<calendar year="{year}" lang="ru" date="2023.09.01">
  <holidays>{holidays}</holidays>
  <days>{days}</days>
</calendar>"""


SAMPLE_XML = calendar_xml(
    2024,
    holidays="""
    <holiday id="1" title="Новогодние каникулы" />
    <holiday id="2" title="День защитника Отечества" />
    <holiday id="3" title="День знаний" />""",
    days="""
    <day d="01.01" t="1" h="1" />
    <day d="01.02" t="1" h="1" />
    <day d="02.22" t="2" />
    <day d="02.23" t="1" h="2" />
    <day d="04.27" t="3" />
    <day d="12.28" t="3" />""",
)


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the environment."""
    return Settings()


@pytest.fixture
def english_settings() -> Settings:
    return Settings(locale="en")
