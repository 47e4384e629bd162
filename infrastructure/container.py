import os
from datetime import date
from functools import lru_cache

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_period_tasks import ListPeriodTasksUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.search_tasks import SearchTasksUseCase
from core.application.toggle_task import MarkUncompletedUseCase, ToggleCompletionUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.clock import Clock
from core.domain.ports.task_repository import TaskRepository


@lru_cache(maxsize=1)
def get_task_repository() -> TaskRepository:
    orm = os.getenv("ORM", "peewee").lower()

    if orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.task_repository import (
            SqlAlchemyTaskRepository,
        )

        return SqlAlchemyTaskRepository()
    elif orm == "memory":
        from infrastructure.memory.repository.task_repository import (
            InMemoryTaskRepository,
        )

        return InMemoryTaskRepository()
    # Default to Peewee
    from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository

    return PeeweeTaskRepository()


def get_clock() -> Clock:
    return date.today


def _repository(repository: TaskRepository | None) -> TaskRepository:
    return repository if repository is not None else get_task_repository()


def _clock(today: Clock | None) -> Clock:
    return today if today is not None else get_clock()


def get_list_tasks_use_case(repository: TaskRepository | None = None) -> ListTasksUseCase:
    return ListTasksUseCase(repository=_repository(repository))


def get_list_period_tasks_use_case(
    repository: TaskRepository | None = None, today: Clock | None = None
) -> ListPeriodTasksUseCase:
    return ListPeriodTasksUseCase(repository=_repository(repository), today=_clock(today))


def get_get_task_use_case(repository: TaskRepository | None = None) -> GetTaskUseCase:
    return GetTaskUseCase(repository=_repository(repository))


def get_search_tasks_use_case(repository: TaskRepository | None = None) -> SearchTasksUseCase:
    return SearchTasksUseCase(repository=_repository(repository))


def get_create_task_use_case(
    repository: TaskRepository | None = None, today: Clock | None = None
) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=_repository(repository), today=_clock(today))


def get_update_task_use_case(
    repository: TaskRepository | None = None, today: Clock | None = None
) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=_repository(repository), today=_clock(today))


def get_toggle_completion_use_case(
    repository: TaskRepository | None = None,
) -> ToggleCompletionUseCase:
    return ToggleCompletionUseCase(repository=_repository(repository))


def get_mark_uncompleted_use_case(
    repository: TaskRepository | None = None,
) -> MarkUncompletedUseCase:
    return MarkUncompletedUseCase(repository=_repository(repository))


def get_delete_task_use_case(repository: TaskRepository | None = None) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=_repository(repository))
