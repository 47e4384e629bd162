from datetime import date

import pytest

from core.application.list_period_tasks import Period, add_months, period_window
from core.domain.models.page import DateRange


@pytest.mark.parametrize(
    "day, months, expected",
    [
        (date(2031, 1, 15), 1, date(2031, 2, 15)),
        (date(2031, 1, 31), 1, date(2031, 2, 28)),
        (date(2032, 1, 31), 1, date(2032, 2, 29)),
        (date(2031, 3, 31), 1, date(2031, 4, 30)),
        (date(2031, 12, 31), 1, date(2032, 1, 31)),
        (date(2031, 11, 30), 3, date(2032, 2, 29)),
    ],
)
def test_add_months_clamps_to_month_end(day, months, expected):
    assert add_months(day, months) == expected


@pytest.mark.parametrize(
    "period, expected_end",
    [
        (Period.TODAY, date(2031, 1, 31)),
        (Period.WEEK, date(2031, 2, 7)),
        (Period.MONTH, date(2031, 2, 28)),
    ],
)
def test_period_window_starts_today(period, expected_end):
    today = date(2031, 1, 31)

    assert period_window(period, today) == DateRange(start=today, end=expected_end)


def test_date_range_open_bounds():
    assert DateRange().contains(date(1999, 1, 1))
    assert DateRange(start=date(2031, 1, 1)).contains(date(2031, 1, 1))
    assert not DateRange(end=date(2031, 1, 1)).contains(date(2031, 1, 2))
