from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_period_tasks_use_case,
    list_tasks_use_case,
    mark_uncompleted_use_case,
    search_tasks_use_case,
    toggle_completion_use_case,
    update_task_use_case,
)
from backend_fastapi.api.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, page_request
from backend_fastapi.api.schemas import ErrorOut, TaskIn, TaskOut, TaskPageOut
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_period_tasks import ListPeriodTasksUseCase, Period
from core.application.list_tasks import ListTasksQuery, ListTasksUseCase
from core.application.search_tasks import SearchTasksUseCase
from core.application.toggle_task import MarkUncompletedUseCase, ToggleCompletionUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase

router = APIRouter(prefix="/tasks", tags=["tasks"])

_NOT_FOUND = {404: {"model": ErrorOut, "description": "Task not found"}}
_BAD_REQUEST = {400: {"model": ErrorOut, "description": "Invalid request"}}


@router.get(
    "",
    response_model=TaskPageOut,
    summary="List tasks (paginated)",
    responses=_BAD_REQUEST,
)
def list_tasks(
    start: date | None = Query(None, description="Earliest due date (inclusive)"),
    end: date | None = Query(None, description="Latest due date (inclusive)"),
    completed: bool | None = Query(None, description="Completion status filter"),
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    sort: list[str] | None = Query(
        None, description="Sort orders, e.g. `dueDate,desc` (repeatable)"
    ),
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> TaskPageOut:
    """
    Lists tasks one page at a time.

    - **start** / **end**: due date bounds; either may be omitted.
    - **completed**: omit to return tasks in any state.
    - **page**, **size**, **sort**: pagination and ordering (default order is by id).
    """
    query = ListTasksQuery(
        start=start,
        end=end,
        completed=completed,
        page=page_request(page, size, sort),
    )
    return TaskPageOut.from_page(use_case.execute(query))


def _period_tasks(
    period: Period, include_completed: bool, use_case: ListPeriodTasksUseCase
) -> list[TaskOut]:
    return [TaskOut.from_domain(t) for t in use_case.execute(period, include_completed)]


@router.get("/today", response_model=list[TaskOut], summary="Tasks due today")
def today_tasks(
    include_completed: bool = Query(
        False, alias="includeCompleted", description="Also return completed tasks"
    ),
    use_case: ListPeriodTasksUseCase = Depends(list_period_tasks_use_case),
) -> list[TaskOut]:
    return _period_tasks(Period.TODAY, include_completed, use_case)


@router.get("/week", response_model=list[TaskOut], summary="Tasks due within 7 days")
def week_tasks(
    include_completed: bool = Query(
        False, alias="includeCompleted", description="Also return completed tasks"
    ),
    use_case: ListPeriodTasksUseCase = Depends(list_period_tasks_use_case),
) -> list[TaskOut]:
    return _period_tasks(Period.WEEK, include_completed, use_case)


@router.get("/month", response_model=list[TaskOut], summary="Tasks due within a month")
def month_tasks(
    include_completed: bool = Query(
        False, alias="includeCompleted", description="Also return completed tasks"
    ),
    use_case: ListPeriodTasksUseCase = Depends(list_period_tasks_use_case),
) -> list[TaskOut]:
    return _period_tasks(Period.MONTH, include_completed, use_case)


@router.get(
    "/search",
    response_model=list[TaskOut],
    summary="Search tasks by title",
    responses=_BAD_REQUEST,
)
def search_tasks(
    title: str = Query(..., description="Text the title must contain (case-sensitive)"),
    include_completed: bool | None = Query(
        None, alias="includeCompleted", description="Also return completed tasks"
    ),
    exact_match: bool = Query(
        False,
        alias="exactMatch",
        deprecated=True,
        description="Old name of includeCompleted; it never meant an exact title match",
    ),
    use_case: SearchTasksUseCase = Depends(search_tasks_use_case),
) -> list[TaskOut]:
    """
    Finds tasks whose title contains **title**.

    Completed tasks are only returned when **includeCompleted** (or the
    legacy **exactMatch**) is true. includeCompleted wins when both are sent.
    """
    if include_completed is None:
        include_completed = exact_match
    return [TaskOut.from_domain(t) for t in use_case.execute(title, include_completed)]


@router.get(
    "/{task_id}",
    response_model=TaskOut,
    summary="Get a task",
    responses=_NOT_FOUND,
)
def get_task(
    task_id: int,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskOut:
    return TaskOut.from_domain(use_case.execute(task_id))


@router.post(
    "",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    responses=_BAD_REQUEST,
)
def create_task(
    body: TaskIn,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskOut:
    """
    Creates a task and returns it with its generated id.

    - **title**: required, not blank.
    - **description**: optional.
    - **completed**: defaults to false.
    - **dueDate**: required, today or later.
    """
    cmd = CreateTaskCommand(
        title=body.title,
        description=body.description,
        completed=body.completed,
        due_date=body.due_date,
    )
    return TaskOut.from_domain(use_case.execute(cmd))


@router.put(
    "/{task_id}",
    response_model=TaskOut,
    summary="Replace a task",
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def update_task(
    task_id: int,
    body: TaskIn,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> TaskOut:
    """
    Overwrites title, description, completed and dueDate of an existing task.
    Omitted optional fields are reset (description to null, completed to false).
    """
    cmd = UpdateTaskCommand(
        title=body.title,
        description=body.description,
        completed=body.completed,
        due_date=body.due_date,
    )
    return TaskOut.from_domain(use_case.execute(task_id, cmd))


@router.patch(
    "/{task_id}/completion",
    response_model=TaskOut,
    summary="Toggle completion",
    responses=_NOT_FOUND,
)
def toggle_completion(
    task_id: int,
    use_case: ToggleCompletionUseCase = Depends(toggle_completion_use_case),
) -> TaskOut:
    return TaskOut.from_domain(use_case.execute(task_id))


@router.patch(
    "/{task_id}/uncompleted",
    response_model=TaskOut,
    summary="Mark as not completed",
    responses=_NOT_FOUND,
)
def mark_uncompleted(
    task_id: int,
    use_case: MarkUncompletedUseCase = Depends(mark_uncompleted_use_case),
) -> TaskOut:
    return TaskOut.from_domain(use_case.execute(task_id))


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a task",
    responses=_NOT_FOUND,
)
def delete_task(
    task_id: int,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> None:
    use_case.execute(DeleteTaskCommand(id=task_id))
