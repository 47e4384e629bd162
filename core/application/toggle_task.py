import logging

from core.domain.exceptions import TaskNotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class ToggleCompletionUseCase:
    """Flip the completion flag."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int) -> Task:
        task = self._repository.get(task_id)
        if task is None:
            logger.warning(f"Toggle rejected: task {task_id} not found")
            raise TaskNotFoundError(task_id)

        task.completed = not task.completed
        saved = self._repository.save(task)
        logger.info(f"Task {task_id} completed={saved.completed}")
        return saved


class MarkUncompletedUseCase:
    """Force the completion flag to False. Repeating it changes nothing."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int) -> Task:
        task = self._repository.get(task_id)
        if task is None:
            logger.warning(f"Uncomplete rejected: task {task_id} not found")
            raise TaskNotFoundError(task_id)

        task.completed = False
        saved = self._repository.save(task)
        logger.info(f"Task {task_id} marked as not completed")
        return saved
