import logging
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.schemas import OrderSubmit, OrderUpdate, SubmissionResponse, SubmitResult
from app.services import order_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["orders"])

# 响应体 code 约定：200 成功 / 201 未找到 / 202 数据库错误
CODE_OK = 200
CODE_NOT_FOUND = 201
CODE_STORE_ERROR = 202

# 每页最多条数
MAX_PAGE_SIZE = 100


@router.post("/submit")
async def submit(form: OrderSubmit, db: AsyncSession = Depends(get_db)):
    """提交订单（同一手机号当天重复提交则更新原订单）"""
    try:
        is_updated = await order_service.submit_order(db, form)
    except SQLAlchemyError as e:
        logger.exception("提交订单失败")
        return JSONResponse(status_code=500, content={"message": "提交失败", "error": str(e)})

    result = SubmitResult(message="订单已更新" if is_updated else "提交成功", is_updated=is_updated)
    return result.model_dump(by_alias=True)


@router.put("/update-order/{order_id}")
async def update_order(order_id: int, update: OrderUpdate, db: AsyncSession = Depends(get_db)):
    """修改订单"""
    try:
        submission = await order_service.update_order(db, order_id, update)
    except SQLAlchemyError as e:
        logger.exception("更新订单失败: id=%s", order_id)
        return JSONResponse(
            status_code=500,
            content={"code": CODE_STORE_ERROR, "message": "更新订单失败", "error": str(e)},
        )

    if submission is None:
        return JSONResponse(status_code=404, content={"code": CODE_NOT_FOUND, "message": "未找到该订单"})

    data = SubmissionResponse.model_validate(submission).model_dump(by_alias=True, mode="json")
    return {"code": CODE_OK, "message": "订单更新成功", "data": data}


@router.get("/submissions")
async def list_submissions(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    db: AsyncSession = Depends(get_db)
):
    """获取订单列表：按日期分组、时间倒序，分页作用于展平后的记录"""
    try:
        result = await order_service.list_orders(db, page=page, limit=limit)
    except SQLAlchemyError as e:
        logger.exception("获取订单列表失败")
        return JSONResponse(status_code=500, content={"code": 500, "message": "获取数据失败", "error": str(e)})

    return {"code": CODE_OK, "message": "请求成功", "data": result.model_dump(by_alias=True, mode="json")}


@router.delete("/delete-order/{order_id}")
async def delete_order(order_id: int, db: AsyncSession = Depends(get_db)):
    """删除订单"""
    try:
        deleted = await order_service.delete_order(db, order_id)
    except SQLAlchemyError as e:
        logger.exception("删除订单失败: id=%s", order_id)
        return JSONResponse(
            status_code=500,
            content={"code": CODE_STORE_ERROR, "message": "删除订单失败", "error": str(e)},
        )

    if not deleted:
        return JSONResponse(status_code=404, content={"code": CODE_NOT_FOUND, "message": "未找到该订单"})
    return {"code": CODE_OK, "message": "订单删除成功"}
