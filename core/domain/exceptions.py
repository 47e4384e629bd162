"""
Domain exceptions for task operations.

Raised by the application layer; the HTTP layer maps them to status codes
in a single place (backend_fastapi.api.errors).
"""

from datetime import date
from typing import Any


class TaskError(Exception):
    """
    Base exception for task errors.

    Attributes:
        message:    Human readable description.
        error_code: Machine readable code.
        details:    Extra context (ids, fields).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__(
            f"Task with id {task_id} not found",
            "TASK_NOT_FOUND",
            {"id": task_id},
        )
        self.task_id = task_id


class InvalidArgumentError(TaskError):
    def __init__(
        self, message: str, details: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, "INVALID_ARGUMENT", details)


class InvalidDueDateError(InvalidArgumentError):
    """The due date lies before the current date."""

    def __init__(self, due_date: date, today: date) -> None:
        super().__init__(
            f"Due date {due_date.isoformat()} is before today ({today.isoformat()})",
            {"field": "dueDate", "dueDate": due_date.isoformat()},
        )


class TaskValidationError(TaskError):
    """Required task fields are missing or blank."""

    def __init__(self, errors: list[dict[str, str]]) -> None:
        fields = ", ".join(e["field"] for e in errors)
        super().__init__(
            f"Task validation failed: {fields}",
            "VALIDATION_ERROR",
            {"errors": errors},
        )
        self.errors = errors
