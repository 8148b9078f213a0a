"""Admin 인증 API 라우터입니다. 가입(기능 플래그)과 로그인 토큰 발급을 담당합니다."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from portfolio.config import settings
from portfolio.database import get_db
from portfolio.schemas.admin import LoginRequest, MessageResponse, SignUpRequest, TokenResponse
from portfolio.services import admin_service
from portfolio.services.token_service import TokenError, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"])


def ensure_signup_enabled():
    if not settings.SHOW_SIGNUP:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


@router.post(
    "/signup",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_signup_enabled)],
)
def sign_up(data: SignUpRequest, db: Session = Depends(get_db)):
    admin_service.sign_up(db, data)
    return MessageResponse(message="Signed up successfully")


@router.post("/login", response_model=TokenResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    admin = admin_service.authenticate(db, data)
    try:
        token = create_access_token(admin.username, admin.email)
    except TokenError as exc:
        logger.error("token generation failed: %s", exc)
        raise HTTPException(status_code=500, detail="Could not generate token")
    return TokenResponse(token=token)
