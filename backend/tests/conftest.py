import asyncio
import os
import tempfile
from datetime import datetime

# 启动流程（init_db / 迁移）使用的数据库，需在导入 app 之前设置
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{os.path.join(tempfile.mkdtemp(), 'orders.db')}")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy import text
from sqlalchemy.pool import NullPool

from app.database import Base, get_db
from app.main import app
from app.services import order_service


@pytest.fixture
def db_engine(tmp_path):
    """每个用例一个独立的 SQLite 文件"""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)

    async def create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_tables())
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def client(db_engine):
    session_factory = async_sessionmaker(db_engine, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


class FixedClock:
    """可手动拨动的时钟"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock(monkeypatch):
    fixed = FixedClock(datetime(2024, 12, 14, 9, 0, 0))
    monkeypatch.setattr(order_service, "get_local_now", fixed)
    return fixed


@pytest.fixture
def drop_table(db_engine):
    """删表模拟数据库故障"""

    def drop(table_name: str):
        async def run():
            async with db_engine.begin() as conn:
                await conn.execute(text(f"DROP TABLE {table_name}"))

        asyncio.run(run())

    return drop
