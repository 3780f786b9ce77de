"""管理员相关 API"""

from fastapi import APIRouter, status

from backend.app.api.deps import CurrentAdmin, SessionDep
from backend.app.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
)
from backend.app.schemas.book import BookBatchCreate
from backend.app.schemas.borrower_request import (
    BorrowerRequestListResponse,
    BorrowerRequestResponse,
)
from backend.app.schemas.common import MessageResponse
from backend.app.services.admin_service import AdminService
from backend.app.services.book_service import BookService
from backend.app.services.borrower_request_service import BorrowerRequestService

router = APIRouter()


# ==================== 认证 ====================


@router.post("/login", response_model=LoginResponse)
async def admin_login(data: LoginRequest, session: SessionDep) -> dict:
    """管理员登录"""
    admin_service = AdminService(session)
    return await admin_service.login(data.username, data.password)


@router.post("/change-password", response_model=MessageResponse)
async def change_password(
    data: ChangePasswordRequest,
    session: SessionDep,
    admin: CurrentAdmin,
) -> MessageResponse:
    """修改当前管理员密码"""
    admin_service = AdminService(session)
    await admin_service.change_password(
        admin.admin_id, data.current_password, data.new_password
    )
    return MessageResponse(message="Password changed successfully")


# ==================== 借书申请 ====================


@router.get("/requests", response_model=BorrowerRequestListResponse)
async def list_borrower_requests(
    session: SessionDep,
    admin: CurrentAdmin,
) -> BorrowerRequestListResponse:
    """获取全部借书申请，最新的在前"""
    request_service = BorrowerRequestService(session)
    requests = await request_service.list_requests()
    return BorrowerRequestListResponse(
        requests=[BorrowerRequestResponse.model_validate(r) for r in requests],
    )


# ==================== 教材管理 ====================


@router.post(
    "/books",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_books(
    data: BookBatchCreate,
    session: SessionDep,
    admin: CurrentAdmin,
) -> MessageResponse:
    """批量添加教材，记录添加人"""
    book_service = BookService(session)
    await book_service.add_books(data.books, admin)
    return MessageResponse(message="Books added successfully")
