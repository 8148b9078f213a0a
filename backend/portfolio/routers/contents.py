"""Content 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from portfolio.database import get_db
from portfolio.middleware.auth_middleware import get_current_admin
from portfolio.schemas.admin import MessageResponse
from portfolio.schemas.content import (
    ContentCreate, ContentFilter, ContentListResponse, ContentOut, ContentUpdate, ContentUpdateResponse,
)
from portfolio.services.content_service import ContentService, NoContentsFound
from portfolio.services.media_client import MediaClient, get_media_client

router = APIRouter(tags=["content"])

ALLOWED_LANGUAGES = {"en", "ru", "uz"}
ALLOWED_CATEGORIES = {"blog", "project"}
FEATURED_VALUES = {"true": True, "false": False}


def get_content_service(
    db: Session = Depends(get_db),
    media: MediaClient = Depends(get_media_client),
) -> ContentService:
    return ContentService(db, media)


@router.post("/post", response_model=ContentOut, status_code=status.HTTP_201_CREATED)
def publish_content(
    data: ContentCreate,
    service: ContentService = Depends(get_content_service),
    _admin: dict = Depends(get_current_admin),
):
    return service.add(data)


@router.put("/update/{content_id}", response_model=ContentUpdateResponse)
def edit_content(
    content_id: int,
    data: ContentUpdate,
    service: ContentService = Depends(get_content_service),
    _admin: dict = Depends(get_current_admin),
):
    content = service.update(content_id, data)
    return ContentUpdateResponse(message="Blog updated successfully", content=content)


@router.delete("/delete/{content_id}", response_model=MessageResponse)
def delete_content(
    content_id: int,
    service: ContentService = Depends(get_content_service),
    _admin: dict = Depends(get_current_admin),
):
    service.delete(content_id)
    return MessageResponse(message="Blog deleted successfully")


@router.get("/blog/{content_id}", response_model=ContentOut)
def get_content(content_id: int, service: ContentService = Depends(get_content_service)):
    return service.get_by_id(content_id)


@router.get("/blogs/{page}", response_model=ContentListResponse)
def list_contents(
    page: int,
    language: str = "en",
    category: Optional[str] = None,
    title: Optional[str] = None,
    featured: Optional[str] = None,
    service: ContentService = Depends(get_content_service),
):
    if page < 1:
        raise HTTPException(status_code=400, detail="Invalid page number")
    if language not in ALLOWED_LANGUAGES:
        raise HTTPException(status_code=400, detail="Invalid language")
    if category is not None and category not in ALLOWED_CATEGORIES:
        raise HTTPException(status_code=400, detail="Invalid category")
    if featured is not None and featured not in FEATURED_VALUES:
        raise HTTPException(status_code=400, detail="Invalid featured value")

    filters = ContentFilter(
        language=language,
        category=category,
        title=title or None,
        featured=FEATURED_VALUES.get(featured) if featured is not None else None,
    )
    try:
        contents = service.get_contents(filters, page)
    except NoContentsFound:
        raise HTTPException(status_code=404, detail="No blogs found")

    message = "We found these blogs" if filters.title else "All blogs fetched successfully"
    return ContentListResponse(message=message, contents=contents)
