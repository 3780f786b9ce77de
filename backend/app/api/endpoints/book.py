"""教材查询 API"""

from fastapi import APIRouter

from backend.app.api.deps import SessionDep
from backend.app.schemas.book import BookListResponse, BookResponse
from backend.app.services.book_service import BookService

router = APIRouter()


@router.get("", response_model=BookListResponse)
async def list_books(session: SessionDep) -> BookListResponse:
    """获取全部教材，按年级、科目排序"""
    books = await BookService(session).list_books()
    return BookListResponse(books=[BookResponse.model_validate(b) for b in books])


@router.get("/{standard}", response_model=BookListResponse)
async def list_books_by_standard(standard: int, session: SessionDep) -> BookListResponse:
    """获取某个年级的教材"""
    books = await BookService(session).list_books(standard=standard)
    return BookListResponse(books=[BookResponse.model_validate(b) for b in books])
