import pytest

from taskapi.domain.exception.domain_exceptions import ConflictError, ValidationError
from taskapi.domain.exception.user_exceptions import (
    InvalidPasswordException,
    UsernameAlreadyExistsException,
    UserValidationError,
)
from taskapi.port.dto.user_dto import CreateUserDTO, LoginDTO
from taskapi.usecase.user_management.authenticate_user import AuthenticateUserUseCase


class TestRegisterUserUseCase:

    async def test_register_user(self, register_user, user_repository, credentials):
        user = await register_user.execute(CreateUserDTO("alice", "secretpw", "Alice A"))

        assert user.id is not None
        assert user.username == "alice"
        assert user.name == "Alice A"
        stored = await user_repository.get_user_by_id(user.id)
        assert stored.password_hash != "secretpw"
        assert await credentials.check_password(stored, "secretpw")

    @pytest.mark.parametrize("password,name", [
        ("secretpw", "Alice A"),
        ("anotherpw", "Alice B"),
        ("x" * 20, "Somebody Else"),
    ])
    async def test_duplicate_username_conflicts(self, register_user, password, name):
        await register_user.execute(CreateUserDTO("alice", "secretpw", "Alice A"))

        with pytest.raises(UsernameAlreadyExistsException) as exc_info:
            await register_user.execute(CreateUserDTO("alice", password, name))

        assert isinstance(exc_info.value, ConflictError)

    async def test_short_password_is_rejected_and_not_stored(self, register_user, user_repository):
        with pytest.raises(InvalidPasswordException):
            await register_user.execute(CreateUserDTO("alice", "12345", "Alice A"))

        assert await user_repository.exists_by_username("alice") is False

    @pytest.mark.parametrize("username,name", [
        ("", "Alice A"),
        ("   ", "Alice A"),
        ("alice", ""),
        ("a" * 81, "Alice A"),
        ("alice", "n" * 101),
    ])
    async def test_invalid_username_or_name(self, register_user, username, name):
        with pytest.raises(UserValidationError) as exc_info:
            await register_user.execute(CreateUserDTO(username, "secretpw", name))

        assert isinstance(exc_info.value, ValidationError)


class TestAuthenticateUserUseCase:

    @pytest.fixture
    def authenticate(self, user_repository, credentials):
        return AuthenticateUserUseCase(user_repository, credentials)

    async def test_valid_credentials(self, register_user, authenticate):
        registered = await register_user.execute(CreateUserDTO("alice", "secretpw", "Alice A"))

        user = await authenticate.execute(LoginDTO("alice", "secretpw"))

        assert user is not None
        assert user.id == registered.id

    async def test_wrong_password(self, register_user, authenticate):
        await register_user.execute(CreateUserDTO("alice", "secretpw", "Alice A"))

        assert await authenticate.execute(LoginDTO("alice", "wrongpw")) is None

    async def test_unknown_user(self, authenticate):
        assert await authenticate.execute(LoginDTO("nobody", "secretpw")) is None
