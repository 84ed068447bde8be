from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Annotated

from ...domain.entity.task_entity import TaskEntity
from ...domain.entity.user_entity import UserEntity, USERNAME_MAX_LENGTH, NAME_MAX_LENGTH


def _require_text(v: str) -> str:
    if not v.strip():
        raise ValueError('Field cannot be empty or whitespace only')
    return v.strip()


class UserCreateRequest(BaseModel):
    username: Annotated[str, Field(min_length=1, max_length=USERNAME_MAX_LENGTH)]
    password: Annotated[str, Field(min_length=1)]
    name: Annotated[str, Field(min_length=1, max_length=NAME_MAX_LENGTH)]

    @field_validator('username', 'name')
    @classmethod
    def validate_text(cls, v):
        return _require_text(v)


class LoginRequest(BaseModel):
    username: Annotated[str, Field(min_length=1)]
    password: Annotated[str, Field(min_length=1)]

    # 登録時と同じ正規化
    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        return _require_text(v)


class UserResponse(BaseModel):
    id: str
    username: str
    name: str

    @classmethod
    def from_entity(cls, user: UserEntity) -> "UserResponse":
        return cls(id=user.id, username=user.username, name=user.name)


class LoginResponse(BaseModel):
    message: str
    user: UserResponse


class TaskCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: Annotated[str, Field(min_length=1)]
    user_id: Annotated[str, Field(min_length=1, alias='userId')]

    @field_validator('description')
    @classmethod
    def validate_description(cls, v):
        return _require_text(v)


class TaskUpdateRequest(BaseModel):
    description: Annotated[str, Field(min_length=1)]

    @field_validator('description')
    @classmethod
    def validate_description(cls, v):
        return _require_text(v)


class TaskResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    description: str
    user_id: str = Field(alias='userId')

    @classmethod
    def from_entity(cls, task: TaskEntity) -> "TaskResponse":
        return cls(id=task.id, description=task.description, user_id=task.user_id)


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
