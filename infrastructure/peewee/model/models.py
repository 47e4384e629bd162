from peewee import AutoField, BooleanField, CharField, DateField, Model, TextField
from infrastructure.peewee.session.db import db

class TaskModel(Model):
    id = AutoField()
    title = CharField(max_length=255)
    description = TextField(null=True)
    completed = BooleanField(default=False, index=True)
    due_date = DateField(index=True)

    class Meta:
        database = db
        table_name = "tasks"
