"""管理员服务：凭据存储、登录与改密"""

import logging
from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.exceptions import InvalidCredentials, NotFound
from backend.app.core.security import (
    create_access_token,
    get_password_hash,
    verify_password,
)
from backend.app.models.admin import Admin

logger = logging.getLogger(__name__)


class AdminService:
    """管理员服务类"""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_admin(self, username: str, password: str) -> Admin:
        """创建管理员"""
        if await self.get_admin_by_username(username):
            raise ValueError("用户名已存在")

        admin = Admin(
            username=username,
            hashed_password=get_password_hash(password),
        )
        self.session.add(admin)
        await self.session.flush()
        await self.session.refresh(admin)
        return admin

    async def count_admins(self) -> int:
        result = await self.session.execute(select(func.count(Admin.id)))
        return result.scalar() or 0

    async def bootstrap(self, seed_admins: Iterable[tuple[str, str]]) -> list[Admin]:
        """admins 表为空时按种子列表创建管理员，已有数据则不做任何修改"""
        if await self.count_admins() > 0:
            return []

        created = []
        for username, password in seed_admins:
            created.append(await self.create_admin(username, password))

        if created:
            logger.info(
                "已初始化 %d 个管理员: %s",
                len(created),
                ", ".join(admin.username for admin in created),
            )
        return created

    async def get_admin_by_id(self, admin_id: int) -> Admin | None:
        """根据 ID 获取管理员"""
        stmt = select(Admin).where(Admin.id == admin_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_admin_by_username(self, username: str) -> Admin | None:
        stmt = select(Admin).where(Admin.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def verify_credentials(self, username: str, password: str) -> Admin:
        """校验用户名和密码，失败统一抛出 InvalidCredentials"""
        admin = await self.get_admin_by_username(username)
        if not admin or not verify_password(password, admin.hashed_password):
            logger.info("管理员登录失败: username=%s", username)
            raise InvalidCredentials()
        return admin

    async def login(self, username: str, password: str) -> dict:
        """管理员登录"""
        admin = await self.verify_credentials(username, password)
        token = create_access_token(admin.id, admin.username)
        logger.info("管理员登录成功: username=%s", admin.username)
        return {
            "success": True,
            "admin": admin.username,
            "token": token,
        }

    async def change_password(
        self,
        admin_id: int,
        current_password: str,
        new_password: str,
    ) -> Admin:
        """修改密码，需先校验当前密码。

        已签发的令牌不会因此失效，直到自然过期。
        """
        admin = await self.get_admin_by_id(admin_id)
        if not admin:
            raise NotFound()

        if not verify_password(current_password, admin.hashed_password):
            raise InvalidCredentials("Current password is incorrect")

        admin.hashed_password = get_password_hash(new_password)
        await self.session.flush()
        await self.session.refresh(admin)
        logger.info("管理员已修改密码: username=%s", admin.username)
        return admin
