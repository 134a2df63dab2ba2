from datetime import datetime
from pydantic import BaseModel

class OwnerInfo(BaseModel):
    """站点所有者公开信息"""
    nickname: str | None = None
    avatar: str | None = None
    description: str | None = None
    created_at: datetime  # site creation time, i.e. when the owner was set up

class SiteStats(BaseModel):
    """站点统计"""
    published_post_count: int
    draft_post_count: int
    used_tag_count: int    # tags referenced by at least one published post
    unused_tag_count: int

class SiteInfoResponse(BaseModel):
    owner: OwnerInfo
    stats: SiteStats
