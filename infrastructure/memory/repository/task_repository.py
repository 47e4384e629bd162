from dataclasses import replace
from datetime import date
from threading import RLock
from typing import Any

from core.domain.models.page import DateRange, Direction, Page, PageRequest
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


def _sort_key(field: str):
    def key(task: Task) -> tuple[bool, Any]:
        value = getattr(task, field)
        # None sorts before any value.
        return (value is not None, value)

    return key


class InMemoryTaskRepository(TaskRepository):
    """
    Thread-safe dict-backed repository for tests and local runs.
    Stored and returned tasks are copies.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: dict[int, Task] = {}
        self._next_id = 1

    def _select(
        self,
        due_dates: DateRange | None = None,
        completed: bool | None = None,
        title_contains: str | None = None,
    ) -> list[Task]:
        with self._lock:
            items = [replace(t) for t in self._items.values()]
        if due_dates is not None:
            items = [
                t for t in items
                if t.due_date is not None and due_dates.contains(t.due_date)
            ]
        if completed is not None:
            items = [t for t in items if t.completed == completed]
        if title_contains is not None:
            items = [t for t in items if title_contains in (t.title or "")]
        return sorted(items, key=_sort_key("id"))

    def find_page(
        self,
        due_dates: DateRange | None,
        completed: bool | None,
        page: PageRequest,
    ) -> Page[Task]:
        items = self._select(due_dates, completed)
        # Stable sorts applied last-to-first give a multi-key order.
        for order in reversed(page.sort):
            items.sort(
                key=_sort_key(order.field),
                reverse=order.direction is Direction.DESC,
            )
        content = items[page.offset:page.offset + page.size]
        return Page(content=content, total_elements=len(items), request=page)

    def find_by_due_date_range(
        self, start: date, end: date, completed: bool | None = None
    ) -> list[Task]:
        items = self._select(DateRange(start=start, end=end), completed)
        return sorted(items, key=_sort_key("due_date"))

    def find_by_due_date(
        self, day: date, completed: bool | None = None
    ) -> list[Task]:
        return self._select(DateRange(start=day, end=day), completed)

    def find_by_title_contains(
        self, text: str, completed: bool | None = None
    ) -> list[Task]:
        return self._select(completed=completed, title_contains=text)

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            task = self._items.get(task_id)
            return None if task is None else replace(task)

    def save(self, task: Task) -> Task:
        with self._lock:
            if task.id is None:
                stored = replace(task, id=self._next_id)
                self._next_id += 1
            else:
                stored = replace(task)
                self._next_id = max(self._next_id, stored.id + 1)
            self._items[stored.id] = stored
            return replace(stored)

    def delete(self, task_id: int) -> None:
        with self._lock:
            self._items.pop(task_id, None)

    def exists(self, task_id: int) -> bool:
        with self._lock:
            return task_id in self._items
