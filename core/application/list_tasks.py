import logging
from dataclasses import dataclass, field
from datetime import date

from core.domain.exceptions import InvalidArgumentError
from core.domain.models.page import DateRange, Page, PageRequest
from core.domain.models.task import SORTABLE_FIELDS, Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ListTasksQuery:
    start: date | None = None
    end: date | None = None
    completed: bool | None = None
    page: PageRequest = field(default_factory=PageRequest)


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, query: ListTasksQuery | None = None) -> Page[Task]:
        """
        Return one page of tasks.

        Filters that are None are not applied: with no dates and no
        completion flag every task is paged through.

        Raises:
            InvalidArgumentError: a sort order names an unknown field.
        """
        query = query or ListTasksQuery()
        for order in query.page.sort:
            if order.field not in SORTABLE_FIELDS:
                raise InvalidArgumentError(
                    f"Cannot sort tasks by '{order.field}'",
                    {"field": "sort", "allowed": sorted(SORTABLE_FIELDS)},
                )

        due_dates = None
        if query.start is not None or query.end is not None:
            due_dates = DateRange(start=query.start, end=query.end)

        page = self._repository.find_page(due_dates, query.completed, query.page)
        logger.debug(
            f"Listed page {page.number} ({page.number_of_elements} of "
            f"{page.total_elements} tasks)"
        )
        return page
