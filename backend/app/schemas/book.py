"""教材相关的请求/响应模型"""

from datetime import datetime

from pydantic import BaseModel, Field

from backend.app.schemas.common import CamelModel


class BookCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    subject: str = Field(..., min_length=1, max_length=100)
    standard: int = Field(..., ge=1)


class BookBatchCreate(BaseModel):
    """批量添加教材请求"""

    books: list[BookCreate] = Field(..., min_length=1)


class BookResponse(CamelModel):
    id: int
    title: str
    subject: str
    standard: int
    added_by: str
    added_time: datetime


class BookListResponse(BaseModel):
    success: bool = True
    books: list[BookResponse]
