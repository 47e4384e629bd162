import logging
from dataclasses import dataclass
from datetime import date

from core.domain.models.task import Task, ensure_due_date_not_past, validate_task
from core.domain.ports.clock import Clock
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str | None
    due_date: date | None = None
    description: str | None = None
    completed: bool = False


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository, today: Clock = date.today) -> None:
        self._repository = repository
        self._today = today

    def execute(self, cmd: CreateTaskCommand) -> Task:
        task = Task(
            id=None,
            title=cmd.title,
            description=cmd.description,
            completed=cmd.completed,
            due_date=cmd.due_date,
        )
        validate_task(task)
        ensure_due_date_not_past(task.due_date, self._today())

        created = self._repository.save(task)
        logger.info(f"Task {created.id} created (due {created.due_date})")
        return created
