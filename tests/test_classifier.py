"""Tests for day classification of structured documents."""

from __future__ import annotations

from datetime import date
from unittest.mock import patch

import pytest
from conftest import SAMPLE_XML

from prodcal.classifier import (
    classify_month,
    classify_year,
    days_between,
    describe_holidays,
    weekends_in_month,
)
from prodcal.exceptions import MonthProcessingError
from prodcal.months import ENGLISH, RUSSIAN
from prodcal.schema import DayInfo, HolidayNameRecord, RawDayRecord, XmlCalendar, parse_calendar_xml


class TestDaysBetween:
    def test_end_is_exclusive(self) -> None:
        days = list(days_between(date(2024, 1, 30), date(2024, 2, 2)))
        assert days == [date(2024, 1, 30), date(2024, 1, 31), date(2024, 2, 1)]

    def test_empty_range(self) -> None:
        assert list(days_between(date(2024, 1, 1), date(2024, 1, 1))) == []


class TestWeekendsInMonth:
    def test_january_2024(self) -> None:
        days = [d.day for d in weekends_in_month(2024, 1)]
        assert days == [6, 7, 13, 14, 20, 21, 27, 28]

    def test_leap_february(self) -> None:
        # 2024-02-29 is a Thursday; the month ends without a weekend
        days = [d.day for d in weekends_in_month(2024, 2)]
        assert days == [3, 4, 10, 11, 17, 18, 24, 25]

    def test_december_ends_on_sunday(self) -> None:
        days = [d.day for d in weekends_in_month(2024, 12)]
        assert days[-1] == 29
        assert 31 not in days


class TestClassifyMonth:
    def test_new_year(self) -> None:
        days = [DayInfo(date(2024, 1, 1), 1, 1)]
        month = classify_month(2024, 1, days, naming=RUSSIAN)
        assert month.number == 1
        assert month.name == "Январь"
        assert "1" in month.holidays

    def test_saturday_without_record_is_weekend(self) -> None:
        month = classify_month(2024, 1, [], naming=RUSSIAN)
        assert "6" in month.weekends

    def test_workday_record_removes_weekend(self) -> None:
        days = [DayInfo(date(2024, 1, 6), 3)]
        month = classify_month(2024, 1, days, naming=RUSSIAN)
        assert "6" not in month.weekends
        assert "6" not in month.holidays
        assert "6" not in month.pre_holidays
        assert "7" in month.weekends

    def test_holiday_on_weekend_stays_weekend(self) -> None:
        # Only type 3 records remove computed weekends
        days = [DayInfo(date(2024, 1, 6), 1, 1)]
        month = classify_month(2024, 1, days, naming=RUSSIAN)
        assert "6" in month.weekends
        assert "6" in month.holidays

    def test_holiday_on_weekday(self) -> None:
        days = [DayInfo(date(2024, 2, 23), 1, 2)]
        month = classify_month(2024, 2, days, naming=RUSSIAN)
        assert month.holidays == ("23",)
        assert "23" not in month.weekends

    def test_pre_holiday(self) -> None:
        days = [DayInfo(date(2024, 2, 22), 2)]
        month = classify_month(2024, 2, days, naming=RUSSIAN)
        assert month.pre_holidays == ("22",)

    def test_ignores_other_months(self) -> None:
        days = [DayInfo(date(2024, 3, 8), 1)]
        month = classify_month(2024, 2, days, naming=RUSSIAN)
        assert month.holidays == ()

    def test_uses_naming(self) -> None:
        assert classify_month(2024, 3, [], naming=ENGLISH).name == "March"


class TestClassifyYear:
    def test_twelve_months_in_order(self) -> None:
        months = classify_year(parse_calendar_xml(SAMPLE_XML), naming=RUSSIAN)
        assert [m.number for m in months] == list(range(1, 13))

    def test_sample_document(self) -> None:
        months = classify_year(parse_calendar_xml(SAMPLE_XML), naming=RUSSIAN)
        assert months[0].holidays == ("1", "2")
        assert months[1].pre_holidays == ("22",)
        assert months[1].holidays == ("23",)
        # 2024-04-27 and 2024-12-28 are working Saturdays
        assert "27" not in months[3].weekends
        assert "28" in months[3].weekends
        assert "28" not in months[11].weekends

    def test_resolves_days_once(self) -> None:
        document = parse_calendar_xml(SAMPLE_XML)
        with patch.object(XmlCalendar, "resolve_days", autospec=True, return_value=[]) as mock_resolve:
            classify_year(document, naming=RUSSIAN)
        assert mock_resolve.call_count == 1

    def test_failure_names_the_month(self) -> None:
        document = XmlCalendar(year=2024)
        with patch("prodcal.classifier.weekends_in_month", side_effect=[iter(()), RuntimeError("boom")]):
            with pytest.raises(MonthProcessingError) as exc_info:
                classify_year(document, naming=RUSSIAN)
        assert exc_info.value.month_name == "Февраль"
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestDescribeHolidays:
    def test_new_year(self) -> None:
        document = XmlCalendar(
            year=2024,
            holidays=(HolidayNameRecord(id=1, title="New Year"),),
            days=(RawDayRecord(type=1, date="01.01", holiday_id=1),),
        )
        assert describe_holidays(document) == "01.01 - New Year"

    def test_sample_document(self) -> None:
        text = describe_holidays(parse_calendar_xml(SAMPLE_XML))
        assert text == "01.01, 01.02 - Новогодние каникулы\n02.23 - День защитника Отечества"

    def test_unreferenced_and_unmatched_are_skipped(self) -> None:
        document = XmlCalendar(
            year=2024,
            holidays=(HolidayNameRecord(id=5, title="Unused"),),
            days=(RawDayRecord(type=1, date="01.01", holiday_id=9),),
        )
        assert describe_holidays(document) == ""

    def test_days_without_reference_are_not_matched(self) -> None:
        document = XmlCalendar(
            year=2024,
            holidays=(HolidayNameRecord(id=0, title="Zero"),),
            days=(RawDayRecord(type=2, date="02.22"),),
        )
        assert describe_holidays(document) == ""

    def test_raw_tokens_are_kept(self) -> None:
        # Unparsable tokens are dropped from day lists but still described
        document = XmlCalendar(
            year=2023,
            holidays=(HolidayNameRecord(id=1, title="Odd"),),
            days=(RawDayRecord(type=1, date="02.29", holiday_id=1),),
        )
        assert describe_holidays(document) == "02.29 - Odd"
