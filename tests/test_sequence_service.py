import asyncio
from types import SimpleNamespace

import pytest
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel

from backend.app.core.database import async_session_factory, engine
from backend.app.models.counter import Counter
from backend.app.services.sequence_service import SequenceAllocator


async def test_first_allocation_starts_at_one(db):
    allocator = SequenceAllocator()

    assert await allocator.next_value("borrowerRequest") == 1
    assert await allocator.next_value("borrowerRequest") == 2
    assert await allocator.next_value("borrowerRequest") == 3


async def test_sequences_are_independent(db):
    allocator = SequenceAllocator()

    await allocator.next_value("borrowerRequest")
    await allocator.next_value("borrowerRequest")

    assert await allocator.next_value("other") == 1


async def test_counter_row_holds_last_value(db):
    allocator = SequenceAllocator()
    for _ in range(4):
        await allocator.next_value("borrowerRequest")

    async with async_session_factory() as session:
        counter = (
            await session.execute(select(Counter).where(Counter.name == "borrowerRequest"))
        ).scalar_one()
    assert counter.seq == 4


async def test_concurrent_allocations_are_distinct_and_gap_free(db):
    allocator = SequenceAllocator()
    n = 20

    values = await asyncio.gather(
        *(allocator.next_value("borrowerRequest") for _ in range(n))
    )

    assert len(set(values)) == n
    assert sorted(values) == list(range(1, n + 1))


async def test_value_is_not_reissued_after_caller_rollback(db):
    allocator = SequenceAllocator()

    async with async_session_factory() as session:
        first = await allocator.next_value("borrowerRequest")
        await session.rollback()

    assert await allocator.next_value("borrowerRequest") == first + 1


async def test_storage_failure_propagates(db):
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    with pytest.raises(SQLAlchemyError):
        await SequenceAllocator().next_value("borrowerRequest")


def test_unsupported_dialect_is_rejected():
    session = SimpleNamespace(
        get_bind=lambda: SimpleNamespace(dialect=SimpleNamespace(name="mysql"))
    )

    with pytest.raises(RuntimeError):
        SequenceAllocator._upsert(session, "borrowerRequest")
