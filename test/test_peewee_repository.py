import os
import unittest

# Use memory database for tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from repository_contract import TaskRepositoryContract

try:
    from peewee import MySQLDatabase
    from infrastructure.peewee.session.db import db
    from infrastructure.peewee.model.models import TaskModel
    from infrastructure.peewee.repository.task_repository import (
        PeeweeTaskRepository,
        _title_contains,
    )
    HAS_PEEWEE = True
except ImportError:
    HAS_PEEWEE = False

@unittest.skipUnless(HAS_PEEWEE, "Peewee not available")
class PeeweeTaskRepositoryTests(TaskRepositoryContract, unittest.TestCase):
    def setUp(self) -> None:
        # Ensure clean state
        if db.is_closed():
            db.connect()
        db.create_tables([TaskModel], safe=True)
        TaskModel.delete().execute()
        self.repo = PeeweeTaskRepository()

    def tearDown(self) -> None:
        db.drop_tables([TaskModel])
        db.close()

    def test_save_with_unknown_id_inserts_row(self) -> None:
        task = self._add("Placeholder")
        task.id = task.id + 100

        self.repo.save(task)

        self.assertTrue(self.repo.exists(task.id))

    def test_title_search_on_mysql_compares_bytes(self) -> None:
        mysql_db = MySQLDatabase(None)

        with mysql_db.bind_ctx([TaskModel]):
            query = TaskModel.select().where(_title_contains("Milk", mysql_db))
            sql, params = query.sql()

        self.assertIn("INSTR(CAST(", sql)
        self.assertIn("AS BINARY)", sql)
        self.assertIn("Milk", params)

if __name__ == "__main__":
    unittest.main()
