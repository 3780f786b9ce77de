"""借书申请服务"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.models.borrower_request import BorrowerRequest
from backend.app.models.counter import BORROWER_REQUEST_SEQUENCE
from backend.app.schemas.borrower_request import BorrowerRequestCreate
from backend.app.services.sequence_service import SequenceAllocator


class BorrowerRequestService:
    def __init__(
        self, session: AsyncSession, allocator: SequenceAllocator | None = None
    ) -> None:
        self.session = session
        self.allocator = allocator or SequenceAllocator()

    async def create_request(self, data: BorrowerRequestCreate) -> BorrowerRequest:
        """提交借书申请，编号取自 borrowerRequest 序列"""
        request_id = await self.allocator.next_value(BORROWER_REQUEST_SEQUENCE)
        record = BorrowerRequest(
            request_id=request_id,
            name=data.name,
            phone=data.phone,
            address=data.address,
            standard=data.standard,
            request_type=data.request_type.value,
            books=[book.model_dump() for book in data.books],
        )
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def list_requests(self) -> list[BorrowerRequest]:
        """获取全部申请，最新的在前"""
        stmt = select(BorrowerRequest).order_by(
            BorrowerRequest.request_time.desc(),
            BorrowerRequest.request_id.desc(),
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
