import os

# 设置测试环境（必须在导入应用之前）
os.environ["APP_ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from blog.core.config import SQLITE_TEST_DB
from blog.db.database import Base, get_session, create_tables
from blog.main import app
from blog.repositories.post import PostRepository
from blog.repositories.post_tag import PostTagRepository
from blog.services.post import PostService
from blog.services.tag import TagService

# 测试数据库配置
test_engine = create_engine(SQLITE_TEST_DB, connect_args={"check_same_thread": False})
TestSessionLocal = sessionmaker(bind=test_engine, autocommit=False, autoflush=False)

OWNER = {
    "username": "owner",
    "password": "Passw0rd!",
    "nickname": "Owner",
    "email": "owner@example.com",
}

@pytest.fixture(autouse=True)
def clean_db():
    """清理并重建测试数据库"""
    Base.metadata.drop_all(bind=test_engine)
    create_tables(test_engine)
    yield
    # 测试结束后清理
    Base.metadata.drop_all(bind=test_engine)

@pytest.fixture
def session(clean_db):
    """直接操作数据库的会话，用于服务层测试"""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def session_factory(clean_db):
    """每个线程各自创建会话，用于并发测试"""
    return TestSessionLocal

@pytest.fixture
def post_service(session):
    return PostService(session, PostRepository(session), PostTagRepository(session))

@pytest.fixture
def tag_service(session):
    return TagService(session, PostTagRepository(session))

@pytest.fixture
def client(clean_db):
    """创建测试客户端"""
    # 创建测试会话
    test_session = TestSessionLocal()

    # 覆盖依赖
    def override_get_session():
        try:
            yield test_session
        finally:
            test_session.close()

    app.dependency_overrides[get_session] = override_get_session

    # 返回测试客户端
    client = TestClient(app)
    yield client

    # 测试结束后清理
    test_session.close()
    app.dependency_overrides.clear()

@pytest.fixture
def owner_data():
    return dict(OWNER)

@pytest.fixture
def admin_client(client, owner_data):
    """返回一个已认证的客户端（站点所有者）"""
    # 初始化站点
    client.post("/api/site/setup", json=owner_data)
    # 登录
    login_response = client.post("/api/user/login",
        json={
            "username": owner_data["username"],
            "password": owner_data["password"]
        })
    token = login_response.json()["access_token"]
    # 创建一个新的客户端，设置认证头
    auth_client = TestClient(client.app)
    auth_client.headers = {"Authorization": f"Bearer {token}"}
    return auth_client
