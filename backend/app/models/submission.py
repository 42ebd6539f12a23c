from sqlalchemy import Column, Integer, String, Text, DateTime, Date, Boolean, UniqueConstraint
from app.database import Base
from app.utils.date_utils import get_local_now, get_local_today


class Submission(Base):
    """订单（地址/联系人提交记录）"""
    __tablename__ = "submissions"
    # 同一手机号每天只保留一条记录，phone 为空时不参与去重
    __table_args__ = (
        UniqueConstraint("phone", "submit_day", name="uq_submissions_phone_day"),
    )

    id = Column(Integer, primary_key=True, index=True)
    address = Column(Text, nullable=True)  # 地址
    name = Column(String(100), nullable=True)  # 姓名
    phone = Column(String(50), nullable=True, index=True)  # 手机号
    remark = Column(Text, nullable=True)  # 备注
    amount = Column(String(50), nullable=True)  # 订单金额（文本）

    created_at = Column(DateTime, default=get_local_now, index=True)
    submit_day = Column(Date, nullable=False, default=get_local_today)  # 提交日期，按 ID 修改时不变
    is_updated = Column(Boolean, nullable=False, default=False)  # 是否为已更新订单
