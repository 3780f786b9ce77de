"""FastAPI 应用入口"""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.app.api import api_router
from backend.app.core.config import settings
from backend.app.core.database import async_session_factory, engine
from backend.app.core.exception_handlers import (
    auth_exception_handler,
    global_exception_handler,
    http_exception_handler,
    storage_exception_handler,
    validation_exception_handler,
)
from backend.app.core.exceptions import AuthError
from backend.app.services.admin_service import AdminService

# 前端构建产物目录
STATIC_DIR = settings.static_dir.resolve()
STATIC_INDEX = STATIC_DIR / "index.html"

# 配置日志
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def check_secrets() -> None:
    """生产环境禁止使用开发默认密钥"""
    insecure = settings.insecure_defaults()
    if not insecure:
        return
    if settings.environment == "production":
        raise RuntimeError(f"生产环境必须设置以下环境变量: {', '.join(insecure)}")
    logger.warning("正在使用开发默认配置: %s", ", ".join(insecure))


async def bootstrap_admins() -> None:
    """admins 表为空时创建初始管理员"""
    async with async_session_factory() as session:
        created = await AdminService(session).bootstrap(settings.seed_admins())
        await session.commit()
    if not created:
        logger.info("管理员已存在，跳过初始化")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """应用生命周期管理"""
    # 启动时
    logger.info("正在启动借书服务后端...")
    check_secrets()
    await bootstrap_admins()
    logger.info("借书服务后端启动完成")
    yield
    # 关闭时
    logger.info("正在关闭借书服务后端...")
    await engine.dispose()


app = FastAPI(
    title="Ilannoor Books API",
    description="教材借阅申请与管理员后台 API",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 全局异常处理
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(AuthError, auth_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)


# 健康检查 API
@app.get("/health", tags=["健康检查"])
async def health_check() -> dict:
    """基础健康检查"""
    return {"status": "healthy"}


@app.get("/health/detailed", tags=["健康检查"])
async def detailed_health_check() -> dict:
    """详细健康检查（数据库连接状态）"""
    from sqlalchemy import text

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        db_status = "connected"
    except SQLAlchemyError as e:
        logger.error(f"数据库连接失败: {e}")
        db_status = "disconnected"

    return {
        "status": "healthy" if db_status == "connected" else "unhealthy",
        "database": db_status,
        "timestamp": datetime.now(UTC).isoformat(),
    }


# 注册 API 路由
app.include_router(api_router, prefix="/api")

# 仅在前端已构建时生效
if STATIC_DIR.exists() and STATIC_INDEX.exists():
    logger.info(f"检测到静态文件目录: {STATIC_DIR}，启用前端服务")

    # 挂载静态资源
    if (STATIC_DIR / "static").is_dir():
        app.mount(
            "/static", StaticFiles(directory=STATIC_DIR / "static"), name="static"
        )

    # SPA 路由回退
    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_spa(full_path: str):
        """SPA 路由回退，未匹配的 API 路径仍返回 404"""
        if full_path == "api" or full_path.startswith("api/"):
            raise StarletteHTTPException(status_code=404, detail="Not Found")
        file_path = (STATIC_DIR / full_path).resolve()
        if file_path.is_relative_to(STATIC_DIR) and file_path.is_file():
            return FileResponse(file_path)
        return FileResponse(STATIC_INDEX)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "backend.app.main:app",
        host="0.0.0.0",
        port=5000,
        reload=settings.environment == "development",
    )
