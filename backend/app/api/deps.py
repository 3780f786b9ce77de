"""API 依赖注入"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_session
from backend.app.core.exceptions import MissingToken
from backend.app.core.security import decode_access_token
from backend.app.schemas.auth import AuthContext, TokenClaims
from backend.app.services.sequence_service import SequenceAllocator

security = HTTPBearer(auto_error=False)
SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def get_current_admin_claims(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> TokenClaims:
    """校验 Bearer 令牌，通过后把认证上下文挂到 request.state.auth。

    只依赖签名密钥和当前时间，不查询数据库。
    """
    if credentials is None or not credentials.credentials:
        raise MissingToken()

    claims = decode_access_token(credentials.credentials)
    request.state.auth = AuthContext(raw_token=credentials.credentials, claims=claims)
    return claims


def get_sequence_allocator() -> SequenceAllocator:
    return SequenceAllocator()


CurrentAdmin = Annotated[TokenClaims, Depends(get_current_admin_claims)]
AllocatorDep = Annotated[SequenceAllocator, Depends(get_sequence_allocator)]
