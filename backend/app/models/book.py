"""教材模型"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from backend.app.models.base import utc_now


class Book(SQLModel, table=True):
    """教材记录，added_by 取自签发令牌的管理员"""

    __tablename__ = "books"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=200)
    subject: str = Field(max_length=100, index=True)
    standard: int = Field(index=True)
    added_by: str = Field(max_length=50)
    added_by_id: int = Field(index=True)
    added_time: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True)
    )
