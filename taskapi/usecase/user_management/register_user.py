from ...port.user_repository import UserRepository
from ...port.dto.user_dto import CreateUserDTO
from ...domain.entity.user_entity import (
    UserEntity,
    USERNAME_MAX_LENGTH,
    NAME_MAX_LENGTH,
)
from ...domain.exception.user_exceptions import (
    UsernameAlreadyExistsException,
    UserValidationError,
)
from .credentials import CredentialManager

class RegisterUserUseCase:
    """
    ユーザー登録のユースケース実装

    事前の存在チェックは分かりやすいエラーのためで、最終的な一意性は
    リポジトリが一意制約違反を ConflictError に変換して保証する。
    """
    def __init__(self, user_repository: UserRepository, credentials: CredentialManager):
        self.user_repository = user_repository
        self.credentials = credentials

    async def execute(self, user_dto: CreateUserDTO) -> UserEntity:
        _check_bounds("username", user_dto.username, USERNAME_MAX_LENGTH)
        _check_bounds("name", user_dto.name, NAME_MAX_LENGTH)

        if await self.user_repository.exists_by_username(user_dto.username):
            raise UsernameAlreadyExistsException(user_dto.username)

        new_user = UserEntity(
            id=None,
            username=user_dto.username,
            name=user_dto.name,
        )
        await self.credentials.set_password(new_user, user_dto.raw_password)

        return await self.user_repository.save(new_user)


def _check_bounds(field_name: str, value: str, max_length: int) -> None:
    if not value or not value.strip():
        raise UserValidationError(f"{field_name} cannot be empty")
    if len(value) > max_length:
        raise UserValidationError(f"{field_name} must be at most {max_length} characters long")
