"""数据模型模块"""

from backend.app.models.admin import Admin
from backend.app.models.book import Book
from backend.app.models.borrower_request import (
    BorrowerRequest,
    RequestStatus,
    RequestType,
)
from backend.app.models.counter import BORROWER_REQUEST_SEQUENCE, Counter

__all__ = [
    "Admin",
    "BORROWER_REQUEST_SEQUENCE",
    "Book",
    "BorrowerRequest",
    "Counter",
    "RequestStatus",
    "RequestType",
]
