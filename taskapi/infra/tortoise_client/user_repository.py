from uuid import UUID, uuid4
from typing import Optional

from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.exceptions import IntegrityError

from ...port.user_repository import UserRepository
from ...domain.entity.user_entity import UserEntity
from ...domain.exception.user_exceptions import UsernameAlreadyExistsException
from .models import User


def parse_uuid(value: str) -> Optional[UUID]:
    """識別子として解釈できない値は「存在しない」として扱う"""
    try:
        return UUID(str(value))
    except ValueError:
        return None


class TortoiseUserRepository(UserRepository):
    """
    Tortoise ORM を用いた UserRepository の実装

    コネクション（プール）はコンストラクタで受け取り、全クエリで using_db に渡す。
    """

    def __init__(self, db: BaseDBAsyncClient):
        self._db = db

    async def exists_by_username(self, username: str) -> bool:
        return await User.filter(username=username).using_db(self._db).exists()

    async def exists_by_id(self, user_id: str) -> bool:
        uuid = parse_uuid(user_id)
        if uuid is None:
            return False
        return await User.filter(id=uuid).using_db(self._db).exists()

    async def save(self, user: UserEntity) -> UserEntity:
        """
        ユーザーを新規登録する

        一意制約違反は同名ユーザーの同時登録によるものとして ConflictError にする。
        """
        try:
            row = await User.create(
                id=uuid4(),
                username=user.username,
                password_hash=user.password_hash,
                name=user.name,
                using_db=self._db,
            )
        except IntegrityError as e:
            raise UsernameAlreadyExistsException(user.username) from e

        user.id = str(row.id)
        return user

    async def get_user_by_name(self, username: str) -> Optional[UserEntity]:
        """ユーザー名でユーザーを取得"""
        row = await User.filter(username=username).using_db(self._db).first()
        return _to_entity(row) if row else None

    async def get_user_by_id(self, user_id: str) -> Optional[UserEntity]:
        """IDでユーザーを取得"""
        uuid = parse_uuid(user_id)
        if uuid is None:
            return None
        row = await User.filter(id=uuid).using_db(self._db).first()
        return _to_entity(row) if row else None


def _to_entity(row: User) -> UserEntity:
    return UserEntity(
        id=str(row.id),
        username=row.username,
        name=row.name,
        password_hash=row.password_hash,
    )
