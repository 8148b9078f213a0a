"""Admin 인증 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, EmailStr, Field


class SignUpRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    # username 또는 email
    login: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    message: str = "Logged in successfully"
    token: str
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    message: str
