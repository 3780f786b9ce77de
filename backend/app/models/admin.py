"""管理员模型"""

from sqlmodel import Field

from backend.app.models.base import TimestampMixin


class Admin(TimestampMixin, table=True):
    """管理员模型，只保存 bcrypt 哈希后的密码"""

    __tablename__ = "admins"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=50)
    hashed_password: str = Field(max_length=200)
