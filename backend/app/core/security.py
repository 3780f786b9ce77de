"""密码哈希和 JWT 令牌管理"""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
from jose import jwt
from jose.exceptions import JOSEError

from backend.app.core.config import settings
from backend.app.core.exceptions import ExpiredToken, InvalidToken
from backend.app.schemas.auth import TokenClaims

TOKEN_TYPE = "admin"
BCRYPT_MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES


def verify_password(plain_password: str, hashed_password: str) -> bool:
    # bcrypt 只处理前 72 字节，超长密码不可能是已存储的密码
    if password_too_long(plain_password):
        return False
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8"),
    )


def get_password_hash(password: str) -> str:
    if password_too_long(password):
        raise ValueError("密码超过 72 字节")
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def create_access_token(
    admin_id: int,
    username: str,
    *,
    now: datetime | None = None,
    secret: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """签发管理员访问令牌，仅包含身份信息和有效期"""
    issued_at = int((now or datetime.now(UTC)).timestamp())
    lifetime = expires_delta or timedelta(
        minutes=settings.jwt_access_token_expire_minutes
    )
    to_encode: dict[str, Any] = {
        "sub": str(admin_id),
        "admin_id": admin_id,
        "username": username,
        "type": TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + int(lifetime.total_seconds()),
    }
    return jwt.encode(
        to_encode,
        secret if secret is not None else settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_access_token(
    token: str,
    *,
    now: datetime | None = None,
    secret: str | None = None,
) -> TokenClaims:
    """校验签名与有效期，返回令牌声明。

    过期判断使用传入的 now（默认当前 UTC 时间），不依赖其他状态，
    签名无效、格式错误抛出 InvalidToken，过期抛出 ExpiredToken。
    """
    try:
        payload = jwt.decode(
            token,
            secret if secret is not None else settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            # 过期由下方按 now 判断，缺失的声明在构造 TokenClaims 时拒绝
            options={"verify_exp": False},
        )
    except JOSEError as e:
        raise InvalidToken() from e

    if payload.get("type") != TOKEN_TYPE:
        raise InvalidToken()

    try:
        claims = TokenClaims(
            admin_id=int(payload["sub"]),
            username=payload["username"],
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidToken() from e

    current = now or datetime.now(UTC)
    if current > claims.expires_at:
        raise ExpiredToken()
    return claims
