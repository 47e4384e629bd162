from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class SearchTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, text: str, include_completed: bool = False) -> list[Task]:
        """
        Tasks whose title contains `text` (case-sensitive).

        With include_completed False only incomplete tasks match.
        """
        completed = None if include_completed else False
        return self._repository.find_by_title_contains(text, completed)
