from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_register_user_usecase, get_user_repository_dependency
from ..schemas import UserCreateRequest, UserResponse
from ...logging_config import get_logger
from ....port.dto.user_dto import CreateUserDTO
from ....port.user_repository import UserRepository
from ....usecase.user_management.register_user import RegisterUserUseCase

router = APIRouter(
    prefix="/api/users",
    tags=["users"]
)
logger = get_logger("api.users")


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    req: UserCreateRequest,
    usecase: RegisterUserUseCase = Depends(get_register_user_usecase)
):
    """
    新規ユーザー登録
    """
    dto = CreateUserDTO(username=req.username, raw_password=req.password, name=req.name)
    user = await usecase.execute(dto)
    logger.info("User registered", extra={"user_id": user.id, "username": user.username})
    return UserResponse.from_entity(user)


@router.get("/username/{username}", response_model=UserResponse)
async def get_user_by_username(
    username: str,
    user_repository: UserRepository = Depends(get_user_repository_dependency)
):
    """ユーザー名でユーザーを取得"""
    user = await user_repository.get_user_by_name(username)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse.from_entity(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    user_repository: UserRepository = Depends(get_user_repository_dependency)
):
    """IDでユーザーを取得"""
    user = await user_repository.get_user_by_id(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse.from_entity(user)
