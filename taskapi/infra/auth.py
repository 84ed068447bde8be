"""
パスワードハッシュモジュール

このモジュールは、Credential Manager が利用するパスワードハッシュ関数の
bcrypt 実装を提供します。セッション・トークンは発行しません。

主な機能:
- パスワードのハッシュ化（呼び出しごとにランダムなソルトを埋め込む）
- ハッシュとの照合（bcrypt の verify による定数時間比較）
- 存在しないユーザー向けのダミー照合

セキュリティ考慮事項:
- bcrypt のコスト係数は設定（BCRYPT_ROUNDS）で調整可能
- 不正な形式のハッシュに対しても例外を送出せず False を返す
"""

from passlib.context import CryptContext

from taskapi.infra.logging_config import get_logger

DEFAULT_BCRYPT_ROUNDS = 10

# ロガー初期化
logger = get_logger("auth")


def create_password_context(rounds: int = DEFAULT_BCRYPT_ROUNDS) -> CryptContext:
    """
    パスワードコンテキストを生成する

    bcryptスキームを使用し、非推奨バージョンを自動処理

    Args:
        rounds (int): bcrypt のコスト係数（4〜31）

    Returns:
        CryptContext: passlib のハッシュコンテキスト
    """
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


class BcryptPasswordHasher:
    """
    passlib/bcrypt を用いた PasswordHasher の実装
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self._context = create_password_context(rounds)

    def hash(self, password: str) -> str:
        """
        パスワードをハッシュ化する

        生成されるハッシュは毎回異なりますが、verify()で正しく検証できます。
        """
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """
        パスワードをハッシュと照合して検証する

        Returns:
            bool: パスワードが一致する場合True。ハッシュが解釈できない場合もFalse
        """
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError) as e:
            logger.warning("Stored password hash could not be verified", extra={"error": str(e)})
            return False

    def dummy_verify(self) -> None:
        """照合1回分の時間を消費する（ユーザー名の存在有無を処理時間から推測させない）"""
        self._context.dummy_verify()
