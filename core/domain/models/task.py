from dataclasses import dataclass
from datetime import date

from core.domain.exceptions import InvalidDueDateError, TaskValidationError

# Fields a page of tasks can be ordered by.
SORTABLE_FIELDS = frozenset({"id", "title", "description", "completed", "due_date"})


@dataclass(slots=True)
class Task:
    id: int | None
    title: str | None
    description: str | None = None
    completed: bool = False
    due_date: date | None = None


def validate_task(task: Task) -> None:
    """
    Check the fields every persisted task must carry.

    Raises:
        TaskValidationError: title is missing or blank, or due_date is None.
    """
    errors: list[dict[str, str]] = []
    if task.title is None or not task.title.strip():
        errors.append({"field": "title", "message": "must not be blank"})
    if task.due_date is None:
        errors.append({"field": "dueDate", "message": "must not be null"})
    if errors:
        raise TaskValidationError(errors)


def ensure_due_date_not_past(due_date: date | None, today: date) -> None:
    """A missing due date is left to validate_task."""
    if due_date is not None and due_date < today:
        raise InvalidDueDateError(due_date, today)
