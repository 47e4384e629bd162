import unittest
from datetime import date, timedelta

from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_period_tasks import ListPeriodTasksUseCase, Period
from core.application.list_tasks import ListTasksQuery, ListTasksUseCase
from core.application.search_tasks import SearchTasksUseCase
from core.application.toggle_task import MarkUncompletedUseCase, ToggleCompletionUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.exceptions import (
    InvalidArgumentError,
    InvalidDueDateError,
    TaskNotFoundError,
    TaskValidationError,
)
from core.domain.models.page import PageRequest, SortOrder
from core.domain.models.task import Task
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository

TODAY = date(2031, 1, 31)


def fixed_today() -> date:
    return TODAY


class CoreUseCasesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTaskRepository()

    def _seed(self, title: str, due_date: date = TODAY, completed: bool = False) -> Task:
        return self.repo.save(
            Task(id=None, title=title, completed=completed, due_date=due_date)
        )

    def _count(self) -> int:
        return self.repo.find_page(None, None, PageRequest(size=1000)).total_elements

    # create

    def test_create_task_assigns_id_and_keeps_fields(self) -> None:
        use_case = CreateTaskUseCase(self.repo, today=fixed_today)

        task = use_case.execute(
            CreateTaskCommand(
                title="Buy milk",
                description="2 litres",
                due_date=TODAY + timedelta(days=1),
            )
        )

        self.assertIsNotNone(task.id)
        self.assertFalse(task.completed)
        loaded = self.repo.get(task.id)
        self.assertEqual(loaded.title, "Buy milk")
        self.assertEqual(loaded.description, "2 litres")
        self.assertEqual(loaded.due_date, TODAY + timedelta(days=1))
        self.assertEqual(loaded, task)

    def test_create_task_due_today_is_allowed(self) -> None:
        use_case = CreateTaskUseCase(self.repo, today=fixed_today)

        task = use_case.execute(CreateTaskCommand(title="Today", due_date=TODAY))

        self.assertEqual(task.due_date, TODAY)

    def test_create_task_in_the_past_fails_and_saves_nothing(self) -> None:
        use_case = CreateTaskUseCase(self.repo, today=fixed_today)

        with self.assertRaises(InvalidDueDateError):
            use_case.execute(
                CreateTaskCommand(title="Late", due_date=TODAY - timedelta(days=1))
            )
        self.assertEqual(self._count(), 0)

    def test_create_task_requires_title_and_due_date(self) -> None:
        use_case = CreateTaskUseCase(self.repo, today=fixed_today)

        with self.assertRaises(TaskValidationError) as ctx:
            use_case.execute(CreateTaskCommand(title="   ", due_date=None))

        fields = {e["field"] for e in ctx.exception.errors}
        self.assertEqual(fields, {"title", "dueDate"})
        self.assertEqual(self._count(), 0)

    # get

    def test_get_task(self) -> None:
        seeded = self._seed("Read book")

        self.assertEqual(GetTaskUseCase(self.repo).execute(seeded.id), seeded)

    def test_get_missing_task_raises_not_found(self) -> None:
        with self.assertRaises(TaskNotFoundError):
            GetTaskUseCase(self.repo).execute(999)

    # update

    def test_update_task_overwrites_all_fields(self) -> None:
        seeded = self._seed("Initial")
        use_case = UpdateTaskUseCase(self.repo, today=fixed_today)

        updated = use_case.execute(
            seeded.id,
            UpdateTaskCommand(
                title="Replaced",
                description="new",
                completed=True,
                due_date=TODAY + timedelta(days=3),
            ),
        )

        self.assertEqual(updated.id, seeded.id)
        self.assertEqual(self.repo.get(seeded.id), updated)
        self.assertEqual(updated.title, "Replaced")
        self.assertEqual(updated.description, "new")
        self.assertTrue(updated.completed)
        self.assertEqual(updated.due_date, TODAY + timedelta(days=3))

    def test_update_missing_task_raises_not_found_before_validation(self) -> None:
        use_case = UpdateTaskUseCase(self.repo, today=fixed_today)

        with self.assertRaises(TaskNotFoundError):
            use_case.execute(
                999, UpdateTaskCommand(title="x", due_date=TODAY - timedelta(days=5))
            )
        self.assertEqual(self._count(), 0)

    def test_update_with_past_due_date_leaves_task_unchanged(self) -> None:
        seeded = self._seed("Keep me")
        use_case = UpdateTaskUseCase(self.repo, today=fixed_today)

        with self.assertRaises(InvalidDueDateError):
            use_case.execute(
                seeded.id,
                UpdateTaskCommand(title="Changed", due_date=TODAY - timedelta(days=1)),
            )
        self.assertEqual(self.repo.get(seeded.id), seeded)

    # toggles

    def test_toggle_completion_is_an_involution(self) -> None:
        seeded = self._seed("Flip")
        use_case = ToggleCompletionUseCase(self.repo)

        once = use_case.execute(seeded.id)
        twice = use_case.execute(seeded.id)

        self.assertTrue(once.completed)
        self.assertEqual(twice.completed, seeded.completed)

    def test_mark_uncompleted_is_idempotent(self) -> None:
        seeded = self._seed("Done", completed=True)
        use_case = MarkUncompletedUseCase(self.repo)

        self.assertFalse(use_case.execute(seeded.id).completed)
        self.assertFalse(use_case.execute(seeded.id).completed)
        self.assertFalse(self.repo.get(seeded.id).completed)

    def test_operations_on_missing_task_raise_not_found(self) -> None:
        self._seed("Untouched")
        operations = [
            lambda: ToggleCompletionUseCase(self.repo).execute(999),
            lambda: MarkUncompletedUseCase(self.repo).execute(999),
            lambda: DeleteTaskUseCase(self.repo).execute(DeleteTaskCommand(id=999)),
        ]

        for operation in operations:
            with self.assertRaises(TaskNotFoundError):
                operation()
        self.assertEqual(self._count(), 1)

    # delete

    def test_delete_task_removes_record(self) -> None:
        seeded = self._seed("Delete")
        use_case = DeleteTaskUseCase(self.repo)

        use_case.execute(DeleteTaskCommand(id=seeded.id))

        self.assertIsNone(self.repo.get(seeded.id))
        with self.assertRaises(TaskNotFoundError):
            use_case.execute(DeleteTaskCommand(id=seeded.id))

    # periods

    def test_today_tasks(self) -> None:
        self._seed("open today")
        self._seed("done today", completed=True)
        self._seed("tomorrow", due_date=TODAY + timedelta(days=1))
        use_case = ListPeriodTasksUseCase(self.repo, today=fixed_today)

        open_only = use_case.execute(Period.TODAY)
        everything = use_case.execute(Period.TODAY, include_completed=True)

        self.assertEqual([t.title for t in open_only], ["open today"])
        self.assertEqual([t.title for t in everything], ["open today", "done today"])

    def test_week_window_is_seven_days_inclusive(self) -> None:
        self._seed("day 7", due_date=TODAY + timedelta(days=7))
        self._seed("day 8", due_date=TODAY + timedelta(days=8))
        self._seed("day 0", due_date=TODAY)
        use_case = ListPeriodTasksUseCase(self.repo, today=fixed_today)

        titles = [t.title for t in use_case.execute(Period.WEEK)]

        self.assertEqual(titles, ["day 0", "day 7"])

    def test_month_window_clamps_to_month_end(self) -> None:
        self._seed("feb 28", due_date=date(2031, 2, 28))
        self._seed("mar 1", due_date=date(2031, 3, 1))
        self._seed("done", due_date=date(2031, 2, 10), completed=True)
        use_case = ListPeriodTasksUseCase(self.repo, today=fixed_today)

        open_only = [t.title for t in use_case.execute(Period.MONTH)]
        everything = [t.title for t in use_case.execute(Period.MONTH, include_completed=True)]

        self.assertEqual(open_only, ["feb 28"])
        self.assertEqual(everything, ["done", "feb 28"])

    # search

    def test_search_excludes_completed_unless_requested(self) -> None:
        self._seed("Buy Milk")
        self._seed("Buy Milk Again", completed=True)
        self._seed("Walk dog")
        use_case = SearchTasksUseCase(self.repo)

        self.assertEqual([t.title for t in use_case.execute("Milk")], ["Buy Milk"])
        self.assertEqual(
            [t.title for t in use_case.execute("Milk", include_completed=True)],
            ["Buy Milk", "Buy Milk Again"],
        )

    # list

    def test_list_tasks_combines_filters(self) -> None:
        self._seed("in range open", due_date=TODAY + timedelta(days=2))
        self._seed("in range done", due_date=TODAY + timedelta(days=3), completed=True)
        self._seed("out of range", due_date=TODAY + timedelta(days=30))
        use_case = ListTasksUseCase(self.repo)
        start, end = TODAY, TODAY + timedelta(days=5)

        both = use_case.execute(ListTasksQuery(start=start, end=end, completed=False))
        dates_only = use_case.execute(ListTasksQuery(start=start, end=end))
        completed_only = use_case.execute(ListTasksQuery(completed=True))
        everything = use_case.execute()

        self.assertEqual([t.title for t in both.content], ["in range open"])
        self.assertEqual(dates_only.total_elements, 2)
        self.assertEqual([t.title for t in completed_only.content], ["in range done"])
        self.assertEqual(everything.total_elements, 3)

    def test_list_tasks_rejects_unknown_sort_field(self) -> None:
        use_case = ListTasksUseCase(self.repo)

        with self.assertRaises(InvalidArgumentError):
            use_case.execute(
                ListTasksQuery(page=PageRequest(sort=(SortOrder("priority"),)))
            )


if __name__ == "__main__":
    unittest.main()
