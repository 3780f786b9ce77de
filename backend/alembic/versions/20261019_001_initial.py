"""初始化数据库结构

Revision ID: 001
Revises:
Create Date: 2026-10-19

创建管理员、序列计数器、借书申请和教材四张表。
"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """创建所有数据库表"""

    # 管理员表
    op.create_table(
        "admins",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column(
            "username", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False
        ),
        sa.Column(
            "hashed_password",
            sqlmodel.sql.sqltypes.AutoString(length=200),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_admins_username", "admins", ["username"], unique=True)

    # 序列计数器表
    op.create_table(
        "counters",
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column("seq", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("name"),
    )

    # 借书申请表
    op.create_table(
        "borrower_requests",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("request_id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("phone", sqlmodel.sql.sqltypes.AutoString(length=30), nullable=False),
        sa.Column(
            "address", sqlmodel.sql.sqltypes.AutoString(length=300), nullable=False
        ),
        sa.Column("standard", sa.Integer(), nullable=False),
        sa.Column("request_type", sa.String(length=20), nullable=False),
        sa.Column("books", sa.JSON(), nullable=False),
        sa.Column(
            "status", sa.String(length=20), nullable=False, server_default="pending"
        ),
        sa.Column("request_time", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_borrower_requests_request_id",
        "borrower_requests",
        ["request_id"],
        unique=True,
    )
    op.create_index(
        "ix_borrower_requests_standard", "borrower_requests", ["standard"]
    )
    op.create_index(
        "ix_borrower_requests_request_time", "borrower_requests", ["request_time"]
    )

    # 教材表
    op.create_table(
        "books",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column(
            "subject", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False
        ),
        sa.Column("standard", sa.Integer(), nullable=False),
        sa.Column(
            "added_by", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False
        ),
        sa.Column("added_by_id", sa.Integer(), nullable=False),
        sa.Column("added_time", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_books_subject", "books", ["subject"])
    op.create_index("ix_books_standard", "books", ["standard"])
    op.create_index("ix_books_added_by_id", "books", ["added_by_id"])


def downgrade() -> None:
    """删除所有表"""
    op.drop_index("ix_books_added_by_id", table_name="books")
    op.drop_index("ix_books_standard", table_name="books")
    op.drop_index("ix_books_subject", table_name="books")
    op.drop_table("books")

    op.drop_index("ix_borrower_requests_request_time", table_name="borrower_requests")
    op.drop_index("ix_borrower_requests_standard", table_name="borrower_requests")
    op.drop_index("ix_borrower_requests_request_id", table_name="borrower_requests")
    op.drop_table("borrower_requests")

    op.drop_table("counters")

    op.drop_index("ix_admins_username", table_name="admins")
    op.drop_table("admins")
