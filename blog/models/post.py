from datetime import datetime, UTC
import enum
from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from blog.db.database import Base

class PostStatus(enum.IntEnum):
    """Post status"""
    DRAFT = 0      # Draft, only visible through the admin API
    PUBLISHED = 1  # Published, visible to everyone

class Post(Base):
    """Post model"""
    __tablename__ = "post"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)  # URL-safe unique identifier
    summary: Mapped[str | None] = mapped_column(String(500), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    cover_image: Mapped[str | None] = mapped_column(String(255), nullable=True)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    read_time: Mapped[int] = mapped_column(Integer, nullable=False, default=1)  # minutes
    is_pinned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[int] = mapped_column(Integer, nullable=False, default=PostStatus.DRAFT)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)  # soft delete
    create_time: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=lambda: datetime.now(UTC))
    update_time: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC)
    )
