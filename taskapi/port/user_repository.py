from typing import Protocol, Optional
from ..domain.entity.user_entity import UserEntity

class UserRepository(Protocol):
    """
    ユーザーデータの永続化インターフェース。

    見つからない場合は例外ではなく None / False を返す。
    """

    async def exists_by_username(self, username: str) -> bool:
        ...

    async def exists_by_id(self, user_id: str) -> bool:
        ...

    async def save(self, user: UserEntity) -> UserEntity:
        ...

    async def get_user_by_name(self, username: str) -> Optional[UserEntity]:
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserEntity]:
        ...
