"""Content 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional
from datetime import datetime

Language = Literal["en", "ru", "uz"]
ContentType = Literal["blog", "project"]


class ContentBase(BaseModel):
    language: Language = "en"
    type: ContentType = "blog"
    image: str = ""
    title: str = Field(min_length=1)
    body: str = Field(min_length=1)
    meta_tag: Optional[str] = None
    featured: bool = False


class ContentCreate(ContentBase):
    pass


class ContentUpdate(BaseModel):
    language: Optional[Language] = None
    type: Optional[ContentType] = None
    image: Optional[str] = None
    title: Optional[str] = Field(default=None, min_length=1)
    body: Optional[str] = Field(default=None, min_length=1)
    meta_tag: Optional[str] = None
    featured: Optional[bool] = None

    @field_validator("language", "type", "image", "title", "body", "featured", mode="before")
    @classmethod
    def reject_null(cls, value):
        # meta_tag 외의 컬럼은 NOT NULL 이므로 명시적 null 을 허용하지 않는다.
        if value is None:
            raise ValueError("field cannot be null")
        return value


class ContentOut(ContentBase):
    id: int
    created_at: Optional[datetime] = None
    score: Optional[float] = None

    model_config = {"from_attributes": True}


class ContentFilter(BaseModel):
    language: Language = "en"
    category: Optional[ContentType] = None
    title: Optional[str] = None
    featured: Optional[bool] = None


class ContentUpdateResponse(BaseModel):
    message: str
    content: ContentOut


class ContentListResponse(BaseModel):
    message: str
    contents: List[ContentOut]
