from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional, List
from blog.models.post import PostStatus
from blog.schemas.tag import TagResponse, check_not_blank

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

class PostCreate(BaseModel):
    """创建文章请求模型"""
    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN, description="文章别名")
    summary: Optional[str] = Field(default=None, max_length=500)
    content: str = Field(..., min_length=1)
    cover_image: Optional[str] = Field(default=None, max_length=255)
    is_pinned: bool = False
    status: PostStatus = PostStatus.DRAFT
    tag_ids: List[int] = Field(default_factory=list, description="标签ID列表")

    @field_validator("title", "content")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        return check_not_blank(value)

class PostUpdate(BaseModel):
    """更新文章请求模型

    未提供的字段保持不变；tag_ids 未提供时清空文章的全部标签。
    """
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    summary: Optional[str] = Field(default=None, max_length=500)
    content: Optional[str] = Field(default=None, min_length=1)
    cover_image: Optional[str] = Field(default=None, max_length=255)
    is_pinned: Optional[bool] = None
    status: Optional[PostStatus] = None
    tag_ids: Optional[List[int]] = Field(default=None, description="标签ID列表")

    @field_validator("title", "content")
    @classmethod
    def validate_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return check_not_blank(value)

class PostQuery(BaseModel):
    """文章分页查询参数"""
    page_num: int = Field(1, ge=1, description="页码")
    page_size: int = Field(10, ge=1, description="每页数量")
    keyword: Optional[str] = Field(None, description="标题关键词")
    tag_id: Optional[int] = Field(None, description="按标签筛选")
    status: Optional[int] = Field(None, ge=0, le=1, description="按状态筛选: 0=草稿, 1=已发布")
    ignore_pinned: bool = Field(False, description="忽略置顶排序，仅后台使用")

class PostArchiveQuery(BaseModel):
    """归档查询参数（不分页）"""
    keyword: Optional[str] = None
    tag_id: Optional[int] = None

class PostNavResponse(BaseModel):
    """上一篇/下一篇"""
    id: int
    title: str
    slug: str

    class Config:
        from_attributes = True

class PostSimpleResponse(BaseModel):
    """文章列表项"""
    id: int
    title: str
    slug: str
    summary: Optional[str] = None
    cover_image: Optional[str] = None
    views: int
    read_time: int
    is_pinned: bool
    status: PostStatus
    create_time: datetime
    tags: List[TagResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True

class PostDetailResponse(PostSimpleResponse):
    """文章详情"""
    content: str
    update_time: datetime
    previous: Optional[PostNavResponse] = None
    next: Optional[PostNavResponse] = None

class ArchivePost(BaseModel):
    """归档中的文章，只保留归档需要的字段"""
    id: int
    title: str
    slug: str
    tags: List[TagResponse] = Field(default_factory=list)
    create_time: datetime

class ArchiveMonth(BaseModel):
    month: int
    total: int
    posts: List[ArchivePost]

class ArchiveYear(BaseModel):
    year: int
    total: int
    months: List[ArchiveMonth]
