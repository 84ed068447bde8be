from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from ..dependencies import get_task_service
from ..schemas import TaskCreateRequest, TaskUpdateRequest, TaskResponse, MessageResponse
from ...logging_config import get_logger
from ....domain.entity.task_entity import TaskEntity
from ....port.dto.task_dto import CreateTaskDTO
from ....usecase.task_management.task_service import TaskService

router = APIRouter(prefix="/api", tags=["tasks"])
logger = get_logger("api.tasks")


async def _get_task_or_404(task_id: str, task_service: TaskService) -> TaskEntity:
    task = await task_service.get_task(task_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    request: TaskCreateRequest,
    task_service: TaskService = Depends(get_task_service)
):
    """新しいタスクを作成"""
    task = await task_service.create_task(
        CreateTaskDTO(description=request.description, user_id=request.user_id)
    )
    logger.info("Task created", extra={"task_id": task.id, "user_id": task.user_id})
    return TaskResponse.from_entity(task)


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    task_service: TaskService = Depends(get_task_service)
):
    """特定のタスクを取得"""
    task = await _get_task_or_404(task_id, task_service)
    return TaskResponse.from_entity(task)


@router.get("/users/{user_id}/tasks", response_model=List[TaskResponse])
async def get_user_tasks(
    user_id: str,
    task_service: TaskService = Depends(get_task_service)
):
    """ユーザーのタスク一覧を取得"""
    tasks = await task_service.get_user_tasks(user_id)
    return [TaskResponse.from_entity(task) for task in tasks]


@router.put("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    request: TaskUpdateRequest,
    task_service: TaskService = Depends(get_task_service)
):
    """タスクの説明を更新"""
    task = await _get_task_or_404(task_id, task_service)
    task = await task_service.update_task(task, request.description)
    return TaskResponse.from_entity(task)


@router.delete("/tasks/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: str,
    task_service: TaskService = Depends(get_task_service)
):
    """タスクを削除"""
    task = await _get_task_or_404(task_id, task_service)
    await task_service.delete_task(task)
    logger.info("Task deleted", extra={"task_id": task_id})
    return MessageResponse(message="Task deleted successfully")
