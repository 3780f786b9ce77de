import asyncio
import os
import tempfile
from pathlib import Path

# 必须在导入 backend 之前设置，settings 和 engine 在导入时创建
_TMP_DIR = Path(tempfile.mkdtemp(prefix="books-test-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR / 'test.db'}"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["ADMIN_PASSWORD"] = "seed-password"
os.environ["BOOTSTRAP_ADMIN_USERNAMES"] = '["furqan", "danish", "abdurrahman"]'
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["STATIC_DIR"] = str(_TMP_DIR / "build")
(_TMP_DIR / "build").mkdir()
(_TMP_DIR / "build" / "index.html").write_text("<html>books</html>")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel

from backend.app import models  # noqa: F401
from backend.app.core.database import async_session_factory, engine

SEED_PASSWORD = "seed-password"


async def reset_database() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)


@pytest.fixture
async def db():
    await reset_database()
    yield


@pytest.fixture
async def session(db):
    async with async_session_factory() as session:
        yield session


@pytest.fixture
def client():
    asyncio.run(reset_database())
    from backend.app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/admin/login",
        json={"username": "furqan", "password": SEED_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
