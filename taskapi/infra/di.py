from typing import Optional

from tortoise.backends.base.client import BaseDBAsyncClient

from .auth import BcryptPasswordHasher
from .config import Settings
from .tortoise_client.task_repository import TortoiseTaskRepository
from .tortoise_client.user_repository import TortoiseUserRepository
from ..port.password_hasher import PasswordHasher
from ..port.task_repository import TaskRepositoryPort
from ..port.user_repository import UserRepository as UserRepositoryPort
from ..usecase.task_management.task_service import TaskService
from ..usecase.user_management.authenticate_user import AuthenticateUserUseCase
from ..usecase.user_management.credentials import CredentialManager
from ..usecase.user_management.register_user import RegisterUserUseCase


class DIContainer:
    """
    依存性注入コンテナ

    アプリケーション起動時に開いたコネクション（プール）を受け取り、
    リポジトリとユースケースを一度だけ組み立てる。
    """

    def __init__(self, db: BaseDBAsyncClient, settings: Settings):
        self._db = db
        self._settings = settings
        self._password_hasher: Optional[PasswordHasher] = None
        self._user_repository: Optional[UserRepositoryPort] = None
        self._task_repository: Optional[TaskRepositoryPort] = None

    @property
    def password_hasher(self) -> PasswordHasher:
        """パスワードハッシュ関数のシングルトンインスタンスを取得"""
        if self._password_hasher is None:
            self._password_hasher = BcryptPasswordHasher(rounds=self._settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def user_repository(self) -> UserRepositoryPort:
        """ユーザーリポジトリのシングルトンインスタンスを取得"""
        if self._user_repository is None:
            self._user_repository = TortoiseUserRepository(self._db)
        return self._user_repository

    @property
    def task_repository(self) -> TaskRepositoryPort:
        """タスクリポジトリのシングルトンインスタンスを取得"""
        if self._task_repository is None:
            self._task_repository = TortoiseTaskRepository(self._db)
        return self._task_repository

    @property
    def credential_manager(self) -> CredentialManager:
        return CredentialManager(self.password_hasher)

    def register_user_usecase(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(self.user_repository, self.credential_manager)

    def authenticate_user_usecase(self) -> AuthenticateUserUseCase:
        return AuthenticateUserUseCase(self.user_repository, self.credential_manager)

    def task_service(self) -> TaskService:
        return TaskService(self.task_repository, self.user_repository)
