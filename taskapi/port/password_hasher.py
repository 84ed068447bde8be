from typing import Protocol


class PasswordHasher(Protocol):
    """
    ソルト付き一方向ハッシュ関数のインターフェース
    """

    def hash(self, password: str) -> str:
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        ...

    def dummy_verify(self) -> None:
        ...
