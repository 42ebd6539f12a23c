from pydantic import BaseModel, Field, StrictBool, field_validator
from typing import Optional, List
from datetime import datetime

ORDER_FIELDS = ("address", "name", "phone", "remark", "amount")

# ========== 订单提交 ==========

class OrderFields(BaseModel):
    address: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    remark: Optional[str] = None
    amount: Optional[str] = None  # 订单金额，按文本存储

    @field_validator(*ORDER_FIELDS, mode="before")
    @classmethod
    def coerce_to_text(cls, value):
        """数字、布尔值转为文本，其余类型交给 pydantic 校验"""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value

class OrderSubmit(OrderFields):
    pass

class OrderUpdate(OrderFields):
    pass

class SubmitResult(BaseModel):
    message: str
    is_updated: bool = Field(serialization_alias="isUpdated")

# 订单记录
class SubmissionResponse(BaseModel):
    id: int
    address: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    remark: Optional[str] = None
    amount: Optional[str] = None
    created_at: datetime = Field(serialization_alias="createdAt")
    is_updated: bool = Field(serialization_alias="isUpdated")

    class Config:
        from_attributes = True

# ========== 列表分页 ==========

class DayGroup(BaseModel):
    date: str  # YYYY-MM-DD
    items: List[SubmissionResponse] = Field(serialization_alias="list")

class SubmissionPage(BaseModel):
    submissions: List[DayGroup]
    total_pages: int = Field(serialization_alias="totalPages")
    current_page: int = Field(serialization_alias="currentPage")
    total_records: int = Field(serialization_alias="totalRecords")

# ========== UI 开关 ==========

class UIToggleRequest(BaseModel):
    enable: StrictBool  # 只接受 JSON 布尔值，"true"/"yes" 等字符串视为无效

class UIStatus(BaseModel):
    is_ui_enabled: bool = Field(serialization_alias="isUIEnabled")
