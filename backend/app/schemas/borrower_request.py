"""借书申请的请求/响应模型"""

from datetime import datetime

from pydantic import BaseModel, Field

from backend.app.models.borrower_request import RequestStatus, RequestType
from backend.app.schemas.common import CamelModel


class RequestedBook(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    subject: str = Field(..., min_length=1, max_length=100)


class BorrowerRequestCreate(CamelModel):
    """提交借书申请"""

    name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=30)
    address: str = Field(..., min_length=1, max_length=300)
    standard: int = Field(..., ge=1)
    request_type: RequestType
    books: list[RequestedBook] = Field(default_factory=list)


class BorrowerRequestCreated(CamelModel):
    success: bool = True
    request_id: int
    message: str = "Request submitted successfully"


class BorrowerRequestResponse(CamelModel):
    """借书申请详情"""

    id: int
    request_id: int
    name: str
    phone: str
    address: str
    standard: int
    request_type: RequestType
    books: list[RequestedBook]
    status: RequestStatus
    request_time: datetime


class BorrowerRequestListResponse(BaseModel):
    success: bool = True
    requests: list[BorrowerRequestResponse]
