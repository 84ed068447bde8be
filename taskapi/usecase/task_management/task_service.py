"""
Task management service - use case layer
"""
from typing import List, Optional

from ...domain.entity.task_entity import TaskEntity
from ...domain.exception.task_exceptions import TaskNotFoundError, TaskValidationError
from ...domain.exception.user_exceptions import UserNotFoundError
from ...port.dto.task_dto import CreateTaskDTO
from ...port.task_repository import TaskRepositoryPort
from ...port.user_repository import UserRepository


class TaskService:
    """Service for task management operations"""

    def __init__(self, task_repository: TaskRepositoryPort, user_repository: UserRepository):
        self._task_repository = task_repository
        self._user_repository = user_repository

    async def create_task(self, task_dto: CreateTaskDTO) -> TaskEntity:
        """Create a task for an existing user"""
        _validate_description(task_dto.description)

        if not await self._user_repository.exists_by_id(task_dto.user_id):
            raise UserNotFoundError(task_dto.user_id)

        task = TaskEntity(
            id=None,
            description=task_dto.description,
            user_id=task_dto.user_id,
        )
        return await self._task_repository.save(task)

    async def get_task(self, task_id: str) -> Optional[TaskEntity]:
        return await self._task_repository.get_task_by_id(task_id)

    async def get_user_tasks(self, user_id: str) -> List[TaskEntity]:
        return await self._task_repository.get_tasks_by_user(user_id)

    async def update_task(self, task: TaskEntity, description: str) -> TaskEntity:
        """
        Persist a new description in place.

        The owning user is not re-checked here.
        """
        task.ensure_persisted("update")
        _validate_description(description)

        if not await self._task_repository.update_description(task.id, description):
            raise TaskNotFoundError(task.id)

        task.update_description(description)
        return task

    async def delete_task(self, task: TaskEntity) -> None:
        """Delete the stored row and clear the task's identifier"""
        task.ensure_persisted("delete")

        if not await self._task_repository.delete_task(task.id):
            raise TaskNotFoundError(task.id)

        task.mark_deleted()


def _validate_description(description: str) -> None:
    if not description or not description.strip():
        raise TaskValidationError("Description cannot be empty")
