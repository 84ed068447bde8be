"""
Domain entity for tasks
"""
from dataclasses import dataclass

from .persisted_entity import PersistedEntity
from ..exception.task_exceptions import TaskStateError


@dataclass
class TaskEntity(PersistedEntity):
    """
    Task owned by a user. ``id`` is None until the task is stored and is
    cleared again once the task is deleted.
    """
    id: str | None
    description: str
    user_id: str

    def update_description(self, description: str) -> None:
        """Replace the description in memory"""
        self.description = description

    def mark_deleted(self) -> None:
        """Forget the identifier so the object cannot be reused"""
        self.id = None

    def _not_persisted_error(self, action: str) -> TaskStateError:
        return TaskStateError(action)
