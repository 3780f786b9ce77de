"""业务逻辑层"""

from backend.app.services.admin_service import AdminService
from backend.app.services.book_service import BookService
from backend.app.services.borrower_request_service import BorrowerRequestService
from backend.app.services.sequence_service import SequenceAllocator

__all__ = [
    "AdminService",
    "BookService",
    "BorrowerRequestService",
    "SequenceAllocator",
]
