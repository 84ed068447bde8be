from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Dict, Any, List
from taskapi.infra.logging_config import get_logger
from ...domain.exception.domain_exceptions import (
    DomainError,
    ValidationError,
    ConflictError,
    NotFoundError,
)

logger = get_logger("api.errors")

GENERIC_ERROR_MESSAGE = "Internal server error"

# Checked in order; subclasses resolve through isinstance
DOMAIN_STATUS_MAP = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
)


def create_error_response(
    error_type: str,
    user_message: str,
    detail: Any = None,
    status_code: int = 500,
    additional_data: Dict[str, Any] = None
) -> JSONResponse:
    """統一されたエラーレスポンスを作成"""
    content = {
        "error_type": error_type,
        "user_message": user_message,
    }

    if detail:
        content["detail"] = detail

    if additional_data:
        content.update(additional_data)

    return JSONResponse(
        status_code=status_code,
        content=content
    )


def _summarize_validation_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    summary = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        summary.append({"field": ".".join(location), "message": error.get("msg", "")})
    return summary


async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """リクエストスキーマのバリデーションエラー（必須項目の欠落等）のハンドリング"""
    errors = _summarize_validation_errors(exc)
    logger.warning(
        "Request validation error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "errors": errors
        }
    )

    missing = [e["field"] for e in errors if e["field"]]
    user_message = (
        f"Invalid or missing fields: {', '.join(missing)}" if missing else "Invalid request body"
    )
    return create_error_response(
        error_type="validation_error",
        user_message=user_message,
        detail=errors,
        status_code=status.HTTP_400_BAD_REQUEST
    )


async def handle_domain_exception(request: Request, exc: DomainError):
    """ドメイン例外のハンドリング"""
    for exc_type, status_code in DOMAIN_STATUS_MAP:
        if isinstance(exc, exc_type):
            break
    else:
        # StateError and anything unclassified
        return await handle_generic_error(request, exc)

    logger.warning(
        f"Domain exception: {exc.__class__.__name__}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_code": exc.error_code,
            "error": str(exc)
        }
    )

    return create_error_response(
        error_type=(exc.error_code or "domain_error").lower(),
        user_message=exc.message,
        status_code=status_code
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    """HTTPException（未定義ルートの404、認証失敗の401等）のハンドリング"""
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        user_message = "Route not found"
    else:
        user_message = str(exc.detail)

    logger.info(
        "HTTP exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.status_code,
        }
    )

    response = create_error_response(
        error_type="http_error",
        user_message=user_message,
        status_code=exc.status_code
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_generic_error(request: Request, exc: Exception):
    """その他のエラーのハンドリング（詳細はログにのみ出力）"""
    logger.error(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error": str(exc),
            "error_type": type(exc).__name__
        },
        exc_info=exc
    )

    return create_error_response(
        error_type="internal_error",
        user_message=GENERIC_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
