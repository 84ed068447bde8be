"""
Domain exceptions for task operations
"""
from .domain_exceptions import NotFoundError, StateError, ValidationError


class TaskNotFoundError(NotFoundError):
    """Raised when a task is not found"""
    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} not found", "TASK_NOT_FOUND")


class TaskStateError(StateError):
    """Raised when a task without an identifier is updated or deleted"""
    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Cannot {action} task without ID", "TASK_NOT_PERSISTED")


class TaskValidationError(ValidationError):
    """Raised when task data is invalid"""
    def __init__(self, message: str):
        super().__init__(f"Task validation error: {message}", "INVALID_TASK")
