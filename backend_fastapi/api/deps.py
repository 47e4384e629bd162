from fastapi import Depends

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
from infrastructure import container


def task_repository() -> TaskRepository:
    return container.get_task_repository()


def clock() -> Clock:
    return container.get_clock()


def list_tasks_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> ListTasksUseCase:
    return container.get_list_tasks_use_case(repository)


def list_period_tasks_use_case(
    repository: TaskRepository = Depends(task_repository),
    today: Clock = Depends(clock),
) -> ListPeriodTasksUseCase:
    return container.get_list_period_tasks_use_case(repository, today)


def get_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> GetTaskUseCase:
    return container.get_get_task_use_case(repository)


def search_tasks_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> SearchTasksUseCase:
    return container.get_search_tasks_use_case(repository)


def create_task_use_case(
    repository: TaskRepository = Depends(task_repository),
    today: Clock = Depends(clock),
) -> CreateTaskUseCase:
    return container.get_create_task_use_case(repository, today)


def update_task_use_case(
    repository: TaskRepository = Depends(task_repository),
    today: Clock = Depends(clock),
) -> UpdateTaskUseCase:
    return container.get_update_task_use_case(repository, today)


def toggle_completion_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> ToggleCompletionUseCase:
    return container.get_toggle_completion_use_case(repository)


def mark_uncompleted_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> MarkUncompletedUseCase:
    return container.get_mark_uncompleted_use_case(repository)


def delete_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> DeleteTaskUseCase:
    return container.get_delete_task_use_case(repository)
