from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional

def check_not_blank(value: Optional[str]) -> Optional[str]:
    """拒绝只包含空白字符的字符串"""
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value

class TagBase(BaseModel):
    """标签基础模型"""
    name: str = Field(..., min_length=1, max_length=50, description="标签名称")

class TagCreate(TagBase):
    """创建标签请求模型"""

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return check_not_blank(value)

class TagUpdate(TagCreate):
    """更新标签请求模型"""
    pass

class TagQuery(BaseModel):
    """标签分页查询参数"""
    page_num: int = Field(1, ge=1, description="页码")
    page_size: int = Field(10, ge=1, description="每页数量")
    keyword: Optional[str] = Field(None, description="按名称筛选")

class TagResponse(TagBase):
    """标签响应模型"""
    id: int = Field(..., description="标签ID")

    class Config:
        from_attributes = True

class TagPostCountResponse(TagResponse):
    """标签及其文章数量"""
    post_count: int = Field(..., description="使用该标签的文章数量")
    create_time: datetime = Field(..., description="创建时间")
