"""API 路由"""

from fastapi import APIRouter

from backend.app.api.endpoints import admin, book, borrower_request

api_router = APIRouter()

api_router.include_router(admin.router, prefix="/admin", tags=["管理员"])
api_router.include_router(
    borrower_request.router, prefix="/borrower-requests", tags=["借书申请"]
)
api_router.include_router(book.router, prefix="/books", tags=["教材"])
