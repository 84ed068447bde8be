"""
Tortoise ORM task repository
"""
from typing import List, Optional
from uuid import uuid4

from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.exceptions import IntegrityError

from ...domain.entity.task_entity import TaskEntity
from ...domain.exception.user_exceptions import UserNotFoundError
from ...port.task_repository import TaskRepositoryPort
from .models import Task
from .user_repository import parse_uuid


class TortoiseTaskRepository(TaskRepositoryPort):
    """タスクのTortoise ORMリポジトリ"""

    def __init__(self, db: BaseDBAsyncClient):
        self._db = db

    async def save(self, task: TaskEntity) -> TaskEntity:
        """タスクを新規作成"""
        user_uuid = parse_uuid(task.user_id)
        if user_uuid is None:
            raise UserNotFoundError(task.user_id)

        try:
            row = await Task.create(
                id=uuid4(),
                description=task.description,
                user_id=user_uuid,
                using_db=self._db,
            )
        except IntegrityError as e:
            # Owner removed between the existence check and the insert
            raise UserNotFoundError(task.user_id) from e

        task.id = str(row.id)
        return task

    async def get_task_by_id(self, task_id: str) -> Optional[TaskEntity]:
        uuid = parse_uuid(task_id)
        if uuid is None:
            return None
        row = await Task.filter(id=uuid).using_db(self._db).first()
        return _to_entity(row) if row else None

    async def get_tasks_by_user(self, user_id: str) -> List[TaskEntity]:
        uuid = parse_uuid(user_id)
        if uuid is None:
            return []
        rows = await Task.filter(user_id=uuid).using_db(self._db).order_by("id")
        return [_to_entity(row) for row in rows]

    async def update_description(self, task_id: str, description: str) -> bool:
        uuid = parse_uuid(task_id)
        if uuid is None:
            return False
        updated = await Task.filter(id=uuid).using_db(self._db).update(description=description)
        return updated > 0

    async def delete_task(self, task_id: str) -> bool:
        uuid = parse_uuid(task_id)
        if uuid is None:
            return False
        deleted = await Task.filter(id=uuid).using_db(self._db).delete()
        return deleted > 0


def _to_entity(row: Task) -> TaskEntity:
    return TaskEntity(
        id=str(row.id),
        description=row.description,
        user_id=str(row.user_id),
    )
