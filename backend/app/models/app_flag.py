"""页面开关模型"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from app.database import Base
from app.utils.date_utils import get_local_now


class AppFlag(Base):
    """布尔开关表，一个 key 一行"""
    __tablename__ = "app_flags"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(100), unique=True, nullable=False, index=True)
    enabled = Column(Boolean, nullable=False, default=False)
    updated_at = Column(DateTime, default=get_local_now, onupdate=get_local_now)
