from dataclasses import dataclass, field

from .persisted_entity import PersistedEntity

USERNAME_MAX_LENGTH = 80
NAME_MAX_LENGTH = 100


@dataclass
class UserEntity(PersistedEntity):
    """
    ユーザーのビジネスドメインモデル

    password_hash は Credential Manager 経由でのみ設定・照合され、
    外部表現には含めない。
    """
    id: str | None
    username: str
    name: str
    password_hash: str | None = field(default=None, repr=False)
