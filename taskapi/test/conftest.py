import pytest
from fastapi.testclient import TestClient
from tortoise import Tortoise, connections

from taskapi.infra.auth import BcryptPasswordHasher
from taskapi.infra.config import Settings
from taskapi.infra.tortoise_client.config import MODELS_MODULE
from taskapi.infra.tortoise_client.task_repository import TortoiseTaskRepository
from taskapi.infra.tortoise_client.user_repository import TortoiseUserRepository
from taskapi.usecase.task_management.task_service import TaskService
from taskapi.usecase.user_management.credentials import CredentialManager
from taskapi.usecase.user_management.register_user import RegisterUserUseCase


@pytest.fixture
def hasher():
    """Cheapest bcrypt cost so the suite stays fast"""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def credentials(hasher):
    return CredentialManager(hasher)


@pytest.fixture
async def db():
    """In-memory database with the users/tasks schema"""
    await Tortoise.init(
        db_url="sqlite://:memory:",
        modules={"models": [MODELS_MODULE]}
    )
    await Tortoise.generate_schemas()
    yield connections.get("default")
    await Tortoise.close_connections()


@pytest.fixture
def user_repository(db):
    return TortoiseUserRepository(db)


@pytest.fixture
def task_repository(db):
    return TortoiseTaskRepository(db)


@pytest.fixture
def register_user(user_repository, credentials):
    return RegisterUserUseCase(user_repository, credentials)


@pytest.fixture
def task_service(task_repository, user_repository):
    return TaskService(task_repository, user_repository)


@pytest.fixture
def test_settings():
    return Settings(
        database_url="sqlite://:memory:",
        bcrypt_rounds=4,
        environment="test",
        _env_file=None,
    )


@pytest.fixture
def client(test_settings):
    """Test client running the real lifespan against an in-memory database"""
    from taskapi.infra.rest_api.main import create_app

    with TestClient(create_app(test_settings)) as client:
        yield client
