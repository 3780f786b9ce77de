"""认证相关的请求/响应模型"""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from backend.app.schemas.common import CamelModel


class LoginRequest(BaseModel):
    """登录请求"""

    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1, max_length=72)


class LoginResponse(BaseModel):
    """登录响应"""

    success: bool = True
    admin: str
    token: str


class ChangePasswordRequest(CamelModel):
    """修改密码请求"""

    current_password: str = Field(..., min_length=1, max_length=72)
    new_password: str = Field(..., min_length=6, max_length=72)

    @field_validator("new_password")
    @classmethod
    def check_bcrypt_length(cls, value: str) -> str:
        # bcrypt 上限按 UTF-8 字节计算
        if len(value.encode("utf-8")) > 72:
            raise ValueError("password must be at most 72 bytes")
        return value


class TokenClaims(BaseModel):
    """校验通过的令牌声明"""

    admin_id: int
    username: str
    issued_at: datetime
    expires_at: datetime


@dataclass
class AuthContext:
    """挂在 request.state.auth 上的认证上下文"""

    raw_token: str
    claims: TokenClaims | None = None
