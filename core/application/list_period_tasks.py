"""
Tasks due in a window derived from the current date.

    TODAY -> [today, today]
    WEEK  -> [today, today + 7 days]
    MONTH -> [today, today + 1 calendar month]

Month arithmetic keeps the day of month and clamps it to the length of the
target month, so 31 January maps to the last day of February.
"""

import calendar
from datetime import date, timedelta
from enum import Enum

from core.domain.models.page import DateRange
from core.domain.models.task import Task
from core.domain.ports.clock import Clock
from core.domain.ports.task_repository import TaskRepository


class Period(Enum):
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"


def add_months(day: date, months: int) -> date:
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def period_window(period: Period, today: date) -> DateRange:
    if period is Period.TODAY:
        return DateRange(start=today, end=today)
    if period is Period.WEEK:
        return DateRange(start=today, end=today + timedelta(days=7))
    return DateRange(start=today, end=add_months(today, 1))


class ListPeriodTasksUseCase:
    def __init__(self, repository: TaskRepository, today: Clock = date.today) -> None:
        self._repository = repository
        self._today = today

    def execute(self, period: Period, include_completed: bool = False) -> list[Task]:
        # Without include_completed only open tasks are returned.
        completed = None if include_completed else False
        today = self._today()

        if period is Period.TODAY:
            return self._repository.find_by_due_date(today, completed)

        window = period_window(period, today)
        return self._repository.find_by_due_date_range(
            window.start, window.end, completed
        )
