import logging
from dataclasses import dataclass
from datetime import date

from core.domain.exceptions import TaskNotFoundError
from core.domain.models.task import Task, ensure_due_date_not_past, validate_task
from core.domain.ports.clock import Clock
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    title: str | None
    due_date: date | None = None
    description: str | None = None
    completed: bool = False


class UpdateTaskUseCase:
    """Full update: every mutable field is overwritten."""

    def __init__(self, repository: TaskRepository, today: Clock = date.today) -> None:
        self._repository = repository
        self._today = today

    def execute(self, task_id: int, cmd: UpdateTaskCommand) -> Task:
        task = self._repository.get(task_id)
        if task is None:
            logger.warning(f"Update rejected: task {task_id} not found")
            raise TaskNotFoundError(task_id)

        task.title = cmd.title
        task.description = cmd.description
        task.due_date = cmd.due_date
        task.completed = cmd.completed

        validate_task(task)
        ensure_due_date_not_past(task.due_date, self._today())

        updated = self._repository.save(task)
        logger.info(f"Task {task_id} updated")
        return updated
