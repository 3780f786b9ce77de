"""Pydantic 请求/响应模型"""

from backend.app.schemas.auth import (
    AuthContext,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    TokenClaims,
)
from backend.app.schemas.book import (
    BookBatchCreate,
    BookCreate,
    BookListResponse,
    BookResponse,
)
from backend.app.schemas.borrower_request import (
    BorrowerRequestCreate,
    BorrowerRequestCreated,
    BorrowerRequestListResponse,
    BorrowerRequestResponse,
    RequestedBook,
)
from backend.app.schemas.common import CamelModel, MessageResponse

__all__ = [
    # Auth
    "AuthContext",
    "ChangePasswordRequest",
    "LoginRequest",
    "LoginResponse",
    "TokenClaims",
    # Book
    "BookBatchCreate",
    "BookCreate",
    "BookListResponse",
    "BookResponse",
    # Borrower request
    "BorrowerRequestCreate",
    "BorrowerRequestCreated",
    "BorrowerRequestListResponse",
    "BorrowerRequestResponse",
    "RequestedBook",
    # Common
    "CamelModel",
    "MessageResponse",
]
