"""
Data Transfer Objects for task operations
"""
from dataclasses import dataclass


@dataclass
class CreateTaskDTO:
    """DTO for task creation"""
    description: str
    user_id: str
