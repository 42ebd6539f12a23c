"""页面 UI 开关状态"""
import asyncio
import logging
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import settings
from app.models.app_flag import AppFlag

logger = logging.getLogger(__name__)

UI_FLAG_KEY = "ui_enabled"


class UIFlagStore:
    """
    UI 开关，持久化在 app_flags 表
    写操作经同一把锁串行执行，读操作直接查库
    """

    def __init__(self, key: str = UI_FLAG_KEY, default: bool = False):
        self.key = key
        self.default = default
        self._lock = asyncio.Lock()

    async def _load(self, db: AsyncSession):
        result = await db.execute(select(AppFlag).where(AppFlag.key == self.key))
        return result.scalar_one_or_none()

    async def get(self, db: AsyncSession) -> bool:
        flag = await self._load(db)
        return self.default if flag is None else flag.enabled

    async def set(self, db: AsyncSession, enable: bool) -> bool:
        async with self._lock:
            flag = await self._load(db)
            if flag:
                flag.enabled = enable
            else:
                db.add(AppFlag(key=self.key, enabled=enable))
            await db.commit()
        logger.info("UI 状态已更新: %s", enable)
        return enable


ui_flag_store = UIFlagStore(default=settings.UI_ENABLED_DEFAULT)


def get_ui_flag_store() -> UIFlagStore:
    return ui_flag_store
