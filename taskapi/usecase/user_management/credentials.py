"""
Credential Manager

ユーザーのパスワードハッシュを設定・照合する唯一のコンポーネント。
ハッシュ関数そのものは PasswordHasher ポート（bcrypt 実装）に委譲する。

bcrypt は CPU を占有するため、ハッシュ・照合はワーカースレッドで実行し、
イベントループ上の他のリクエストを止めない。
"""
import asyncio
from typing import Optional

from ...domain.entity.user_entity import UserEntity
from ...domain.exception.user_exceptions import InvalidPasswordException
from ...port.password_hasher import PasswordHasher

MIN_PASSWORD_LENGTH = 6
# bcrypt reads at most 72 bytes of input
MAX_PASSWORD_BYTES = 72


def _password_problem(password: Optional[str]) -> Optional[str]:
    """ハッシュに使えないパスワードなら理由を返す"""
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    if "\x00" in password:
        return "Password must not contain NUL characters"
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"
    return None


class CredentialManager:
    def __init__(self, hasher: PasswordHasher):
        self._hasher = hasher

    async def set_password(self, user: UserEntity, password: Optional[str]) -> None:
        """
        パスワードを検証してハッシュを置き換える

        検証に失敗した場合、既存のハッシュは変更しない。

        Raises:
            InvalidPasswordException: 6文字未満、NUL文字を含む、
                または UTF-8 で72バイトを超える場合
        """
        problem = _password_problem(password)
        if problem:
            raise InvalidPasswordException(problem)
        user.password_hash = await asyncio.to_thread(self._hasher.hash, password)

    async def check_password(self, user: UserEntity, password: str) -> bool:
        """
        パスワードを照合する

        ハッシュ未設定の場合は False。設定できない形のパスワードは
        どのハッシュとも一致しない（bcrypt の72バイト切り詰めで
        別のパスワードが一致してしまうのを防ぐ）。
        """
        if not user.password_hash:
            return False
        if _password_problem(password):
            await self.dummy_check()
            return False
        return await asyncio.to_thread(self._hasher.verify, password, user.password_hash)

    async def dummy_check(self) -> None:
        """存在しないユーザーへのログインでも照合と同程度の時間を消費する"""
        await asyncio.to_thread(self._hasher.dummy_verify)
