"""Contact Request 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ContactRequestCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    lastname: str = Field(min_length=1, max_length=100)
    phone: str = Field(min_length=1, max_length=50)
    description: Optional[str] = None
    telegram: str = Field(min_length=1, max_length=100)


class ContactRequestOut(ContactRequestCreate):
    id: int
    ip: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ContactSubmitResponse(BaseModel):
    message: str
    request: ContactRequestOut
