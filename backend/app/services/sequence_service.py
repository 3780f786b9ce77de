"""自增序列分配

每次分配都是一条 INSERT ... ON CONFLICT DO UPDATE ... RETURNING 语句，
由数据库保证原子性，并在独立事务中立即提交：
已经返回的值即使调用方事务回滚也不会被再次分配。
"""

import logging
from collections.abc import Callable

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import async_session_factory
from backend.app.models.counter import Counter

logger = logging.getLogger(__name__)

_UPSERT_BY_DIALECT = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class SequenceAllocator:
    """基于 counters 表的序列分配器"""

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession] = async_session_factory,
    ) -> None:
        self.session_factory = session_factory

    async def next_value(self, name: str) -> int:
        """原子地将序列加一并返回新值，序列不存在时从 1 开始"""
        async with self.session_factory() as session:
            async with session.begin():
                result = await session.execute(self._upsert(session, name))
                value = result.scalar_one()

        logger.debug("序列 %s 分配值 %d", name, value)
        return value

    @staticmethod
    def _upsert(session: AsyncSession, name: str):
        dialect = session.get_bind().dialect.name
        insert = _UPSERT_BY_DIALECT.get(dialect)
        if insert is None:
            raise RuntimeError(f"不支持的数据库方言: {dialect}")

        table = Counter.__table__
        return (
            insert(table)
            .values(name=name, seq=1)
            .on_conflict_do_update(
                index_elements=[table.c.name],
                set_={"seq": table.c.seq + 1},
            )
            .returning(table.c.seq)
        )
