from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_authenticate_user_usecase
from ..schemas import LoginRequest, LoginResponse, UserResponse
from ...logging_config import get_logger
from ....port.dto.user_dto import LoginDTO
from ....usecase.user_management.authenticate_user import AuthenticateUserUseCase

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = get_logger("api.auth")


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    usecase: AuthenticateUserUseCase = Depends(get_authenticate_user_usecase)
):
    """
    認証情報を照合する（セッション・トークンは発行しない）
    """
    user = await usecase.execute(LoginDTO(username=req.username, raw_password=req.password))

    if user is None:
        logger.warning("Login attempt with invalid credentials", extra={"username": req.username})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    logger.info("User logged in successfully", extra={"user_id": user.id, "username": user.username})

    return LoginResponse(message="Login successful", user=UserResponse.from_entity(user))
