import os

# 运行环境: development / test / production
APP_ENV = os.getenv("APP_ENV", "development")

# 数据库配置
SQLITE_DEV_DB = "sqlite:///./dev.db"
SQLITE_TEST_DB = "sqlite:///./test.db"
SQLITE_PROD_DB = "sqlite:///./prod.db"
DATABASE_URL = os.getenv("DATABASE_URL")

# JWT
SECRET_KEY = os.getenv("JWT_SECRET", "your-secret-key")  # override in production
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "10080"))  # 7 days

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Pagination: a page size of -1 returns every matching row and skips the count query
UNLIMITED_PAGE_SIZE = -1
