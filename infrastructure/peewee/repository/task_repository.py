import logging
from datetime import date

from peewee import Database, MySQLDatabase, PostgresqlDatabase, fn

from core.domain.models.page import DateRange, Direction, Page, PageRequest
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db
from infrastructure.sql_limits import fits_int64

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    "id": TaskModel.id,
    "title": TaskModel.title,
    "description": TaskModel.description,
    "completed": TaskModel.completed,
    "due_date": TaskModel.due_date,
}


def _to_domain(row: TaskModel) -> Task:
    return Task(
        id=row.id,
        title=row.title,
        description=row.description,
        completed=row.completed,
        due_date=row.due_date,
    )


def _title_contains(text: str, database: Database = db):
    # LIKE is case-insensitive on SQLite; a position lookup is not.
    if isinstance(database, PostgresqlDatabase):
        return fn.STRPOS(TaskModel.title, text) > 0
    if isinstance(database, MySQLDatabase):
        # The default MySQL collations ignore case unless compared as bytes.
        return fn.INSTR(TaskModel.title.cast("BINARY"), text) > 0
    return fn.INSTR(TaskModel.title, text) > 0


def _conditions(
    due_dates: DateRange | None = None,
    completed: bool | None = None,
    title_contains: str | None = None,
) -> list:
    conditions = []
    if due_dates is not None:
        if due_dates.start is not None:
            conditions.append(TaskModel.due_date >= due_dates.start)
        if due_dates.end is not None:
            conditions.append(TaskModel.due_date <= due_dates.end)
    if completed is not None:
        conditions.append(TaskModel.completed == completed)
    if title_contains is not None:
        conditions.append(_title_contains(title_contains))
    return conditions


class PeeweeTaskRepository(TaskRepository):
    def __init__(self):
        # Tables are created on start-up; there are no migrations.
        db.connect(reuse_if_open=True)
        db.create_tables([TaskModel], safe=True)

    def _select(self, conditions: list, *order_by) -> list[Task]:
        query = TaskModel.select()
        if conditions:
            query = query.where(*conditions)
        return [_to_domain(row) for row in query.order_by(*order_by)]

    def find_page(
        self,
        due_dates: DateRange | None,
        completed: bool | None,
        page: PageRequest,
    ) -> Page[Task]:
        query = TaskModel.select()
        conditions = _conditions(due_dates, completed)
        if conditions:
            query = query.where(*conditions)

        total = query.count()
        ordering = [
            _SORT_COLUMNS[o.field].desc()
            if o.direction is Direction.DESC
            else _SORT_COLUMNS[o.field].asc()
            for o in page.sort
        ] or [TaskModel.id.asc()]
        if not fits_int64(page.offset):
            # Past any row the store can hold.
            return Page(content=[], total_elements=total, request=page)
        rows = query.order_by(*ordering).limit(page.size).offset(page.offset)
        return Page(
            content=[_to_domain(row) for row in rows],
            total_elements=total,
            request=page,
        )

    def find_by_due_date_range(
        self, start: date, end: date, completed: bool | None = None
    ) -> list[Task]:
        return self._select(
            _conditions(DateRange(start=start, end=end), completed),
            TaskModel.due_date.asc(),
            TaskModel.id.asc(),
        )

    def find_by_due_date(
        self, day: date, completed: bool | None = None
    ) -> list[Task]:
        conditions = [TaskModel.due_date == day]
        if completed is not None:
            conditions.append(TaskModel.completed == completed)
        return self._select(conditions, TaskModel.id.asc())

    def find_by_title_contains(
        self, text: str, completed: bool | None = None
    ) -> list[Task]:
        return self._select(
            _conditions(completed=completed, title_contains=text),
            TaskModel.id.asc(),
        )

    def get(self, task_id: int) -> Task | None:
        if not fits_int64(task_id):
            return None
        row = TaskModel.get_or_none(TaskModel.id == task_id)
        return None if row is None else _to_domain(row)

    def save(self, task: Task) -> Task:
        with db.atomic():
            if task.id is None:
                row = TaskModel.create(
                    title=task.title,
                    description=task.description,
                    completed=task.completed,
                    due_date=task.due_date,
                )
                return _to_domain(row)

            try:
                existing = TaskModel.get(TaskModel.id == task.id)
                existing.title = task.title
                existing.description = task.description
                existing.completed = task.completed
                existing.due_date = task.due_date
                existing.save()
            except TaskModel.DoesNotExist:
                logger.warning(f"Task {task.id} has no row, inserting it")
                existing = TaskModel.create(
                    id=task.id,
                    title=task.title,
                    description=task.description,
                    completed=task.completed,
                    due_date=task.due_date,
                )
            return _to_domain(existing)

    def delete(self, task_id: int) -> None:
        if not fits_int64(task_id):
            return
        query = TaskModel.delete().where(TaskModel.id == task_id)
        query.execute()

    def exists(self, task_id: int) -> bool:
        if not fits_int64(task_id):
            return False
        return TaskModel.select().where(TaskModel.id == task_id).exists()
