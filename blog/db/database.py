from contextlib import contextmanager
from functools import lru_cache
import os
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from blog.core import config

Base = declarative_base()

@lru_cache()
def get_engine():
    """获取数据库引擎"""
    env = os.getenv("APP_ENV", config.APP_ENV)
    if env == "test":
        DATABASE_URL = config.SQLITE_TEST_DB
    elif env == "production":
        DATABASE_URL = config.DATABASE_URL or config.SQLITE_PROD_DB
    else:  # development
        DATABASE_URL = config.SQLITE_DEV_DB

    connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
    return create_engine(DATABASE_URL, connect_args=connect_args)

def get_session_maker():
    """获取会话工厂"""
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())

def get_session():
    """获取数据库会话"""
    SessionLocal = get_session_maker()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """在一个事务中执行多步写操作

    正常结束时提交；任何异常都会回滚本次调用已执行的全部写入，然后原样抛出。
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise

def create_tables(db_engine: Optional[object] = None):
    """创建所有表

    Args:
        db_engine: 可选的数据库引擎，如果不提供则使用默认引擎
    """
    # make sure every model is registered on Base.metadata
    from blog.models import post, post_tag, tag, user  # noqa: F401

    engine = db_engine or get_engine()
    Base.metadata.create_all(bind=engine)
