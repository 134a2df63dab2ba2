from datetime import datetime, UTC
from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from blog.db.database import Base

class Tag(Base):
    """Tag model"""
    __tablename__ = "tag"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)  # tag name must be unique
    create_time: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(UTC))
    update_time: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC)
    )
