import logging
import os
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from app.config import settings

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.DATABASE_URL)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


def get_db_path(db_url: Optional[str] = None) -> Optional[str]:
    """获取 SQLite 数据库文件路径，非 SQLite 数据库返回 None"""
    db_url = db_url or settings.DATABASE_URL
    if not db_url.startswith('sqlite'):
        return None
    return db_url.split(':///')[-1]


async def get_db():
    async with async_session() as session:
        yield session


async def init_db():
    """建表（已存在的表不做修改）"""
    # 注册模型到 Base.metadata
    import app.models  # noqa: F401

    db_file = get_db_path()
    if db_file:
        os.makedirs(os.path.dirname(os.path.abspath(db_file)), exist_ok=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("数据库连接成功: %s", engine.url.render_as_string(hide_password=True))
