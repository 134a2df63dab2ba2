import re
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator

USERNAME_PATTERN = r"^[a-zA-Z0-9_-]+$"

def check_password_strength(value: str) -> str:
    """密码需同时包含字母、数字和特殊字符"""
    if not (re.search(r"[a-zA-Z]", value) and re.search(r"\d", value) and re.search(r"[\W_]", value)):
        raise ValueError("password must contain letters, digits and special characters")
    return value

class UserSetup(BaseModel):
    """首次初始化站点所有者"""
    username: str = Field(..., min_length=4, max_length=50, pattern=USERNAME_PATTERN)
    password: str = Field(..., min_length=8, max_length=64)
    nickname: str | None = Field(None, max_length=50)
    avatar: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=255)
    email: EmailStr | None = None

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password_strength(value)

class UserLogin(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class UserUpdate(BaseModel):
    username: str = Field(..., min_length=4, max_length=50, pattern=USERNAME_PATTERN)
    nickname: str | None = Field(None, max_length=50)
    avatar: str | None = Field(None, max_length=255)
    email: EmailStr | None = None
    description: str | None = Field(None, max_length=255)

class PasswordUpdate(BaseModel):
    old_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=64)

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, value: str) -> str:
        return check_password_strength(value)

class UserResponse(BaseModel):
    id: int
    username: str
    nickname: str | None = None
    avatar: str | None = None
    email: str | None = None
    description: str | None = None
    create_time: datetime

    class Config:
        from_attributes = True

class Token(BaseModel):
    access_token: str
    token_type: str
    expires_in: int  # seconds
    username: str
    nickname: str | None = None
    avatar: str | None = None
