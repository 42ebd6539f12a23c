"""页面 UI 开关接口"""
import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.schemas import UIStatus, UIToggleRequest
from app.services.ui_flag import UIFlagStore, get_ui_flag_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ui"])


def store_error(message: str, e: SQLAlchemyError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"code": 500, "message": message, "error": str(e)})


@router.get("/ui-status")
async def get_ui_status(
    db: AsyncSession = Depends(get_db),
    store: UIFlagStore = Depends(get_ui_flag_store)
):
    """获取 UI 状态"""
    try:
        enabled = await store.get(db)
    except SQLAlchemyError as e:
        logger.exception("获取 UI 状态失败")
        return store_error("状态获取失败", e)
    return {"code": 200, "message": "状态获取成功", "data": UIStatus(is_ui_enabled=enabled).model_dump(by_alias=True)}


@router.post("/toggle-ui")
async def toggle_ui(
    payload: UIToggleRequest,
    db: AsyncSession = Depends(get_db),
    store: UIFlagStore = Depends(get_ui_flag_store)
):
    """设置 UI 状态，enable 必须是布尔值"""
    try:
        enabled = await store.set(db, payload.enable)
    except SQLAlchemyError as e:
        logger.exception("更新 UI 状态失败")
        return store_error("UI 状态更新失败", e)
    return {"code": 200, "message": "UI 状态更新成功", "data": UIStatus(is_ui_enabled=enabled).model_dump(by_alias=True)}
