"""
订单读写逻辑：同日去重提交、按 ID 更新/删除、按日期分组的分页列表
"""
from __future__ import annotations
import logging
import math
from itertools import groupby
from typing import List, Optional
from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.submission import Submission
from app.schemas import ORDER_FIELDS, DayGroup, OrderSubmit, OrderUpdate, SubmissionPage, SubmissionResponse
from app.utils.date_utils import day_key, get_local_now

logger = logging.getLogger(__name__)

# 支持 ON CONFLICT DO UPDATE 的方言
INSERT_BY_DIALECT = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


async def submit_order(db: AsyncSession, form: OrderSubmit) -> bool:
    """
    提交订单：同一手机号同一天已有记录则覆盖更新，否则新建
    返回: 是否为更新
    """
    dialect = db.get_bind().dialect.name
    insert = INSERT_BY_DIALECT.get(dialect)
    if insert is None:
        raise RuntimeError(f"数据库 {dialect} 不支持按手机号去重提交")

    now = get_local_now()
    stmt = insert(Submission).values(
        address=form.address,
        name=form.name,
        phone=form.phone,
        remark=form.remark,
        amount=form.amount,
        created_at=now,
        submit_day=now.date(),
        is_updated=False,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["phone", "submit_day"],
        set_={
            "address": stmt.excluded.address,
            "name": stmt.excluded.name,
            "remark": stmt.excluded.remark,
            "amount": stmt.excluded.amount,
            "created_at": stmt.excluded.created_at,
            "is_updated": True,
        },
    ).returning(Submission.id, Submission.is_updated)

    result = await db.execute(stmt)
    submission_id, is_updated = result.one()
    await db.commit()

    logger.info("订单%s: id=%s phone=%s", "已更新" if is_updated else "已创建", submission_id, form.phone)
    return is_updated


async def update_order(db: AsyncSession, order_id: int, update: OrderUpdate) -> Optional[Submission]:
    """按 ID 覆盖请求中给出的字段，并强制标记为已更新、刷新时间戳"""
    submission = await db.get(Submission, order_id)
    if submission is None:
        return None

    for key, value in update.model_dump(include=set(ORDER_FIELDS), exclude_unset=True).items():
        setattr(submission, key, value)

    now = get_local_now()
    # submit_day 保持原提交日期，修改不占用当天的去重名额
    submission.created_at = now
    submission.is_updated = True

    await db.commit()
    await db.refresh(submission)
    logger.info("订单已修改: id=%s", order_id)
    return submission


async def delete_order(db: AsyncSession, order_id: int) -> bool:
    submission = await db.get(Submission, order_id)
    if submission is None:
        return False
    await db.delete(submission)
    await db.commit()
    logger.info("订单已删除: id=%s", order_id)
    return True


def group_by_day(submissions: List[Submission]) -> List[DayGroup]:
    """
    按 created_at 的日期把已排好序（时间倒序）的记录分组
    组的顺序与组内顺序都沿用输入顺序
    """
    return [
        DayGroup(
            date=date,
            items=[SubmissionResponse.model_validate(s) for s in items],
        )
        for date, items in groupby(submissions, key=lambda s: day_key(s.created_at))
    ]


async def list_orders(db: AsyncSession, page: int = 1, limit: int = 10) -> SubmissionPage:
    """
    分页获取订单
    全部记录按时间倒序展平后切片，再把当前页按日期重新分组
    """
    total_records = (await db.execute(select(func.count(Submission.id)))).scalar_one()

    result = await db.execute(
        select(Submission)
        .order_by(Submission.created_at.desc(), Submission.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    )
    page_data = result.scalars().all()

    return SubmissionPage(
        submissions=group_by_day(page_data),
        total_pages=math.ceil(total_records / limit),
        current_page=page,
        total_records=total_records,
    )
