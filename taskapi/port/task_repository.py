"""
Port interface for task repository
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..domain.entity.task_entity import TaskEntity


class TaskRepositoryPort(ABC):
    """Port interface for task repository operations"""

    @abstractmethod
    async def save(self, task: TaskEntity) -> TaskEntity:
        """Insert a new task and assign its identifier"""
        pass

    @abstractmethod
    async def get_task_by_id(self, task_id: str) -> Optional[TaskEntity]:
        """Get task by ID"""
        pass

    @abstractmethod
    async def get_tasks_by_user(self, user_id: str) -> List[TaskEntity]:
        """Get all tasks for a user ordered by ID"""
        pass

    @abstractmethod
    async def update_description(self, task_id: str, description: str) -> bool:
        """Update task description, False if no row matched"""
        pass

    @abstractmethod
    async def delete_task(self, task_id: str) -> bool:
        """Delete task by ID, False if no row matched"""
        pass
