"""
ユーザー関連の例外クラス

このモジュールは、ユーザー管理に関する様々な例外を定義します。
登録、認証、データ取得等のユーザー操作で発生する例外を統一的に管理します。
"""

from .domain_exceptions import ConflictError, NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """指定されたユーザーが見つからない場合の例外"""
    def __init__(self, user_id: str):
        super().__init__(f"User not found: {user_id}", "USER_NOT_FOUND")
        self.user_id = user_id


class UsernameAlreadyExistsException(ConflictError):
    """指定のユーザー名は既に存在しています。"""
    def __init__(self, username: str):
        super().__init__(f"Username '{username}' already exists", "USERNAME_TAKEN")
        self.username = username


class InvalidPasswordException(ValidationError):
    """パスワードの形式が不正です。"""
    def __init__(self, message: str):
        super().__init__(message, "INVALID_PASSWORD")


class UserValidationError(ValidationError):
    """ユーザー名・表示名が不正です。"""
    def __init__(self, message: str):
        super().__init__(message, "INVALID_USER")
