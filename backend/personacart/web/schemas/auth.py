"""
Pydantic schemas cho authentication.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

MAX_PASSWORD_BYTES = 72


class RegisterRequest(BaseModel):
    """Schema cho request đăng ký."""
    username: str = Field(..., min_length=3, max_length=50, description="Username")
    password: str = Field(..., min_length=6, max_length=MAX_PASSWORD_BYTES, description="Password (tối thiểu 6 ký tự)")

    @field_validator('username')
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username không chứa khoảng trắng."""
        v = v.strip()
        if any(ch.isspace() for ch in v):
            raise ValueError('Username must not contain whitespace')
        return v.lower()

    @field_validator('password')
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        """bcrypt giới hạn 72 bytes UTF-8, không phải 72 ký tự."""
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f'Password must be at most {MAX_PASSWORD_BYTES} bytes in UTF-8')
        return v


class LoginRequest(BaseModel):
    """Schema cho request đăng nhập."""
    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class UserResponse(BaseModel):
    """Schema cho response thông tin user."""
    id: str
    username: str
    created_at: datetime
    last_login: Optional[datetime] = None

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Schema cho response sau khi đăng nhập/đăng ký thành công."""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class ErrorResponse(BaseModel):
    """Schema cho error response."""
    detail: str
