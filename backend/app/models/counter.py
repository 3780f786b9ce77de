"""序列计数器模型"""

from sqlmodel import Field, SQLModel

BORROWER_REQUEST_SEQUENCE = "borrowerRequest"


class Counter(SQLModel, table=True):
    """命名序列，每个序列一行，seq 为最近一次分配出去的值"""

    __tablename__ = "counters"

    name: str = Field(primary_key=True, max_length=50)
    seq: int = Field(default=0, nullable=False)
