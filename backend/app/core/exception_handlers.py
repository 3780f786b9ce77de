"""全局异常处理器

所有错误响应统一为 {"success": false, "message": ...}。
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.app.core.exceptions import AuthError

logger = logging.getLogger(__name__)

# 错误类型 → 提示模板（{field} 会被替换为字段名）
_ERROR_MESSAGES: dict[str, str] = {
    "missing": "{field} is required",
    "string_too_short": "{field} is too short",
    "string_too_long": "{field} is too long",
    "int_parsing": "{field} must be a number",
    "literal_error": "{field} has an invalid value",
    "enum": "{field} has an invalid value",
}


def _error_body(message: str) -> dict:
    return {"success": False, "message": message}


def _friendly_validation_message(errors: list[dict]) -> str:
    """把 Pydantic validation errors 转成第一条友好提示"""
    for err in errors:
        loc = [part for part in err.get("loc", []) if part != "body"]
        field_name = ".".join(str(part) for part in loc)
        template = _ERROR_MESSAGES.get(err.get("type", ""))
        if template and field_name:
            return template.format(field=field_name)
        if field_name:
            return f"{field_name} is invalid"

    return "Invalid request body"


async def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """处理 Pydantic 请求体校验错误"""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body(_friendly_validation_message(exc.errors())),
    )


async def auth_exception_handler(_request: Request, exc: AuthError) -> JSONResponse:
    """认证/授权失败，消息保持笼统"""
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message),
        headers=headers,
    )


async def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=exc.headers,
    )


async def storage_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """数据库异常不重试，直接返回通用错误"""
    logger.error(
        "数据库操作失败: %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Storage error"),
    )


async def global_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    """兜底异常处理，避免内部错误泄露"""
    logger.error("未处理的异常: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error"),
    )
