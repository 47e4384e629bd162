from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from core.domain.models.page import Page
from core.domain.models.task import Task


class TaskIn(BaseModel):
    """
    Task body for POST and PUT. An `id` sent by the client is ignored.

    Title and due date are optional here so that the domain validation
    reports them together with the other field errors.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Buy milk",
                "description": "2 litres",
                "completed": False,
                "dueDate": "2030-01-31",
            }
        },
    )

    title: str | None = Field(default=None, description="Non-blank task title")
    description: str | None = Field(default=None, description="Optional free text")
    completed: bool = Field(default=False, description="Completion flag")
    due_date: date | None = Field(
        default=None,
        alias="dueDate",
        description="ISO-8601 calendar date, not before today",
    )


class TaskOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str | None = None
    completed: bool
    due_date: date = Field(alias="dueDate")

    @classmethod
    def from_domain(cls, task: Task) -> "TaskOut":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            due_date=task.due_date,
        )


class TaskPageOut(BaseModel):
    """Page envelope; field names follow the Spring Data page layout."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TaskOut]
    total_elements: int = Field(alias="totalElements")
    total_pages: int = Field(alias="totalPages")
    number: int = Field(description="Zero-based page number")
    size: int = Field(description="Requested page size")
    number_of_elements: int = Field(alias="numberOfElements")
    first: bool
    last: bool
    empty: bool

    @classmethod
    def from_page(cls, page: Page[Task]) -> "TaskPageOut":
        return cls(
            content=[TaskOut.from_domain(t) for t in page.content],
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            number=page.number,
            size=page.size,
            number_of_elements=page.number_of_elements,
            first=page.first,
            last=page.last,
            empty=page.empty,
        )


class ErrorOut(BaseModel):
    error: str
    message: str
    details: dict | list | None = None
