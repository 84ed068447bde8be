"""
Tortoise ORM models for users and tasks
"""
from tortoise.models import Model
from tortoise import fields


class User(Model):
    id = fields.UUIDField(primary_key=True)
    username = fields.CharField(max_length=80, unique=True)
    password_hash = fields.CharField(max_length=255)
    name = fields.CharField(max_length=100)

    class Meta:
        table = "users"


class Task(Model):
    id = fields.UUIDField(primary_key=True)
    description = fields.TextField()
    user = fields.ForeignKeyField(
        "models.User",
        related_name="tasks",
        on_delete=fields.CASCADE,
        db_index=True,
    )

    class Meta:
        table = "tasks"
