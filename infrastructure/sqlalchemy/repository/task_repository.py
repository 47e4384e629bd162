from datetime import date

from sqlalchemy import LargeBinary, cast, func

from core.domain.models.page import DateRange, Direction, Page, PageRequest
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.model.models import TaskModel
from infrastructure.sql_limits import fits_int64
from infrastructure.sqlalchemy.session.db import engine, get_session, init_db

_SORT_COLUMNS = {
    "id": TaskModel.id,
    "title": TaskModel.title,
    "description": TaskModel.description,
    "completed": TaskModel.completed,
    "due_date": TaskModel.due_date,
}


def _to_domain(task_model: TaskModel) -> Task:
    return Task(
        id=task_model.id,
        title=task_model.title,
        description=task_model.description,
        completed=task_model.completed,
        due_date=task_model.due_date,
    )


def _title_contains(text: str, dialect_name: str | None = None):
    # LIKE is case-insensitive on SQLite; a position lookup is not.
    dialect_name = dialect_name or engine.dialect.name
    if dialect_name == "postgresql":
        return func.strpos(TaskModel.title, text) > 0
    if dialect_name in ("mysql", "mariadb"):
        # The default MySQL collations ignore case unless compared as bytes.
        return func.instr(cast(TaskModel.title, LargeBinary), text) > 0
    return func.instr(TaskModel.title, text) > 0


def _filters(
    due_dates: DateRange | None = None,
    completed: bool | None = None,
    title_contains: str | None = None,
) -> list:
    filters = []
    if due_dates is not None:
        if due_dates.start is not None:
            filters.append(TaskModel.due_date >= due_dates.start)
        if due_dates.end is not None:
            filters.append(TaskModel.due_date <= due_dates.end)
    if completed is not None:
        filters.append(TaskModel.completed == completed)
    if title_contains is not None:
        filters.append(_title_contains(title_contains))
    return filters


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self) -> None:
        init_db()

    def _select(self, filters: list, *order_by) -> list[Task]:
        session = get_session()
        try:
            task_models = (
                session.query(TaskModel).filter(*filters).order_by(*order_by).all()
            )
            return [_to_domain(task_model) for task_model in task_models]
        finally:
            session.close()

    def find_page(
        self,
        due_dates: DateRange | None,
        completed: bool | None,
        page: PageRequest,
    ) -> Page[Task]:
        session = get_session()
        try:
            query = session.query(TaskModel).filter(*_filters(due_dates, completed))
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
            task_models = (
                query.order_by(*ordering).limit(page.size).offset(page.offset).all()
            )
            return Page(
                content=[_to_domain(task_model) for task_model in task_models],
                total_elements=total,
                request=page,
            )
        finally:
            session.close()

    def find_by_due_date_range(
        self, start: date, end: date, completed: bool | None = None
    ) -> list[Task]:
        return self._select(
            _filters(DateRange(start=start, end=end), completed),
            TaskModel.due_date.asc(),
            TaskModel.id.asc(),
        )

    def find_by_due_date(
        self, day: date, completed: bool | None = None
    ) -> list[Task]:
        filters = [TaskModel.due_date == day, *_filters(completed=completed)]
        return self._select(filters, TaskModel.id.asc())

    def find_by_title_contains(
        self, text: str, completed: bool | None = None
    ) -> list[Task]:
        return self._select(
            _filters(completed=completed, title_contains=text),
            TaskModel.id.asc(),
        )

    def get(self, task_id: int) -> Task | None:
        if not fits_int64(task_id):
            return None
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None
            return _to_domain(task_model)
        finally:
            session.close()

    def save(self, task: Task) -> Task:
        session = get_session()
        try:
            task_model = None
            if task.id is not None:
                task_model = session.get(TaskModel, task.id)
            if task_model is None:
                task_model = TaskModel(id=task.id)
                session.add(task_model)

            task_model.title = task.title
            task_model.description = task.description
            task_model.completed = task.completed
            task_model.due_date = task.due_date
            session.commit()
            return _to_domain(task_model)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def delete(self, task_id: int) -> None:
        if not fits_int64(task_id):
            return
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return
            session.delete(task_model)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def exists(self, task_id: int) -> bool:
        if not fits_int64(task_id):
            return False
        session = get_session()
        try:
            return session.query(TaskModel.id).filter(TaskModel.id == task_id).first() is not None
        finally:
            session.close()
