from abc import ABC, abstractmethod
from datetime import date

from core.domain.models.page import DateRange, Page, PageRequest
from core.domain.models.task import Task


class TaskRepository(ABC):
    """
    Storage port for tasks.

    Filters set to None put no constraint on their field. Absence is
    reported as None / False, never raised.
    """

    @abstractmethod
    def find_page(
        self,
        due_dates: DateRange | None,
        completed: bool | None,
        page: PageRequest,
    ) -> Page[Task]:
        raise NotImplementedError

    @abstractmethod
    def find_by_due_date_range(
        self, start: date, end: date, completed: bool | None = None
    ) -> list[Task]:
        """Tasks due within [start, end], ascending by due date."""
        raise NotImplementedError

    @abstractmethod
    def find_by_due_date(
        self, day: date, completed: bool | None = None
    ) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def find_by_title_contains(
        self, text: str, completed: bool | None = None
    ) -> list[Task]:
        """Case-sensitive substring match on title."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def save(self, task: Task) -> Task:
        """Insert when task.id is None, otherwise overwrite the row with that id."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def exists(self, task_id: int) -> bool:
        raise NotImplementedError
