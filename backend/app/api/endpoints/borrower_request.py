"""借书申请 API"""

from fastapi import APIRouter, status

from backend.app.api.deps import AllocatorDep, SessionDep
from backend.app.schemas.borrower_request import (
    BorrowerRequestCreate,
    BorrowerRequestCreated,
)
from backend.app.services.borrower_request_service import BorrowerRequestService

router = APIRouter()


@router.post(
    "",
    response_model=BorrowerRequestCreated,
    status_code=status.HTTP_201_CREATED,
)
async def submit_borrower_request(
    data: BorrowerRequestCreate,
    session: SessionDep,
    allocator: AllocatorDep,
) -> BorrowerRequestCreated:
    """提交借书申请"""
    request_service = BorrowerRequestService(session, allocator)
    record = await request_service.create_request(data)
    return BorrowerRequestCreated(request_id=record.request_id)
