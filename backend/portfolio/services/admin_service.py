"""Admin 도메인 서비스 레이어입니다. 가입/로그인 규칙과 데이터 접근 흐름을 캡슐화합니다."""

import logging

from fastapi import HTTPException, status
from passlib.context import CryptContext
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio.config import settings
from portfolio.models.admin import Admin
from portfolio.schemas.admin import LoginRequest, SignUpRequest

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=[settings.PASSWORD_HASH_SCHEME], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        return False


def sign_up(db: Session, data: SignUpRequest) -> Admin:
    admin = Admin(
        username=data.username,
        email=str(data.email),
        password_hash=hash_password(data.password),
    )
    db.add(admin)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username or email already exists",
        )
    db.refresh(admin)
    logger.info("admin account created: %s", admin.username)
    return admin


def authenticate(db: Session, data: LoginRequest) -> Admin:
    # '@'가 포함되면 email, 아니면 username으로 조회
    if "@" in data.login:
        admin = db.query(Admin).filter(func.lower(Admin.email) == data.login.strip().lower()).first()
    else:
        admin = db.query(Admin).filter(Admin.username == data.login).first()
    if not admin or not verify_password(data.password, admin.password_hash):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")
    return admin
