from typing import Optional

from ...port.user_repository import UserRepository
from ...port.dto.user_dto import LoginDTO
from ...domain.entity.user_entity import UserEntity
from .credentials import CredentialManager


class AuthenticateUserUseCase:
    """
    ユーザー名とパスワードを照合するユースケース

    セッションやトークンは発行しない。照合に成功したユーザーを返し、
    失敗時は理由を区別せず None を返す。
    """
    def __init__(self, user_repository: UserRepository, credentials: CredentialManager):
        self.user_repository = user_repository
        self.credentials = credentials

    async def execute(self, login_dto: LoginDTO) -> Optional[UserEntity]:
        user = await self.user_repository.get_user_by_name(login_dto.username)
        if user is None:
            await self.credentials.dummy_check()
            return None

        if not await self.credentials.check_password(user, login_dto.raw_password):
            return None

        return user
