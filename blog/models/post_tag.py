from datetime import datetime, UTC
from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column
from blog.db.database import Base

class PostTag(Base):
    """文章标签关联模型

    复合主键 (post_id, tag_id)，没有独立的代理主键。
    """
    __tablename__ = "post_tag"

    post_id: Mapped[int] = mapped_column(Integer, primary_key=True)  # 不使用外键，只存储文章ID
    tag_id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)  # 不使用外键，只存储标签ID
    create_time: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(UTC))
