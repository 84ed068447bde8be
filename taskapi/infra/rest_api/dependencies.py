"""
FastAPI依存性注入の定義

このモジュールは、FastAPIエンドポイントで使用される依存性注入関数を提供します。
アプリケーション起動時に app.state へ登録された DIContainer からサービスを取得し、
FastAPIの依存性システムに統合するためのアダプターレイヤーとして機能します。
"""

from fastapi import Depends, Request
from typing import Annotated

from ..di import DIContainer
from ...port.user_repository import UserRepository
from ...usecase.task_management.task_service import TaskService
from ...usecase.user_management.authenticate_user import AuthenticateUserUseCase
from ...usecase.user_management.register_user import RegisterUserUseCase


def get_container(request: Request) -> DIContainer:
    """
    DIコンテナを取得

    Returns:
        DIContainer: lifespan で組み立てられたコンテナ
    """
    return request.app.state.container


def get_user_repository_dependency(
    container: Annotated[DIContainer, Depends(get_container)]
) -> UserRepository:
    """
    ユーザーリポジトリの依存性を取得

    Returns:
        UserRepository: ユーザーデータアクセスインスタンス
    """
    return container.user_repository


def get_register_user_usecase(
    container: Annotated[DIContainer, Depends(get_container)]
) -> RegisterUserUseCase:
    """
    ユーザー登録ユースケースを取得

    Returns:
        RegisterUserUseCase: ユーザー登録ユースケースインスタンス
    """
    return container.register_user_usecase()


def get_authenticate_user_usecase(
    container: Annotated[DIContainer, Depends(get_container)]
) -> AuthenticateUserUseCase:
    """ログイン照合ユースケースを取得"""
    return container.authenticate_user_usecase()


def get_task_service(
    container: Annotated[DIContainer, Depends(get_container)]
) -> TaskService:
    """タスク管理サービスを取得"""
    return container.task_service()
