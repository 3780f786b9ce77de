"""借书申请模型"""

from datetime import datetime
from enum import Enum
from typing import Any

from sqlalchemy import JSON, Column, DateTime, String
from sqlmodel import Field, SQLModel

from backend.app.models.base import utc_now


class RequestType(str, Enum):
    """申请类型"""

    FULL_SET = "full-set"  # 整套教材
    INDIVIDUAL = "individual"  # 单本


class RequestStatus(str, Enum):
    """申请状态"""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class BorrowerRequest(SQLModel, table=True):
    """借书申请"""

    __tablename__ = "borrower_requests"

    id: int | None = Field(default=None, primary_key=True)
    request_id: int = Field(unique=True, index=True)
    name: str = Field(max_length=100)
    phone: str = Field(max_length=30)
    address: str = Field(max_length=300)
    standard: int = Field(index=True)
    request_type: str = Field(sa_column=Column(String(20), nullable=False))
    books: list[dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )  # [{title, subject}]
    status: str = Field(
        default=RequestStatus.PENDING.value,
        sa_column=Column(String(20), nullable=False, server_default="pending"),
    )
    request_time: datetime = Field(
        default_factory=utc_now,
        index=True,
        sa_type=DateTime(timezone=True),
    )
