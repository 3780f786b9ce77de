"""教材服务"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.models.book import Book
from backend.app.schemas.auth import TokenClaims
from backend.app.schemas.book import BookCreate


class BookService:
    """教材服务类"""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add_books(
        self, books: list[BookCreate], added_by: TokenClaims
    ) -> list[Book]:
        """批量添加教材，记录操作的管理员"""
        records = [
            Book(
                title=book.title,
                subject=book.subject,
                standard=book.standard,
                added_by=added_by.username,
                added_by_id=added_by.admin_id,
            )
            for book in books
        ]
        self.session.add_all(records)
        await self.session.flush()
        return records

    async def list_books(self, standard: int | None = None) -> list[Book]:
        """按年级、科目排序列出教材，可按年级过滤"""
        stmt = select(Book)
        if standard is not None:
            stmt = stmt.where(Book.standard == standard)
        stmt = stmt.order_by(Book.standard, Book.subject, Book.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
