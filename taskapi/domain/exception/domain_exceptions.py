"""
ドメイン例外の基底クラス

ストア層・ユースケース層から送出される例外の分類を定義します。
REST層はこの分類だけを見てHTTPステータスへ変換します。
"""

from typing import Optional


class DomainError(Exception):
    """ドメイン例外の基底クラス"""
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ValidationError(DomainError):
    """入力値が不正な場合の例外"""
    def __init__(self, message: str, error_code: str = "VALIDATION_ERROR"):
        super().__init__(message, error_code)


class ConflictError(DomainError):
    """一意制約に違反する場合の例外"""
    def __init__(self, message: str, error_code: str = "CONFLICT"):
        super().__init__(message, error_code)


class NotFoundError(DomainError):
    """参照先のエンティティが存在しない場合の例外"""
    def __init__(self, message: str, error_code: str = "NOT_FOUND"):
        super().__init__(message, error_code)


class StateError(DomainError):
    """永続化されていないエンティティを操作しようとした場合の例外"""
    def __init__(self, message: str, error_code: str = "INVALID_STATE"):
        super().__init__(message, error_code)
