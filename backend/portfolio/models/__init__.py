"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from portfolio.models.content import Content
from portfolio.models.admin import Admin
from portfolio.models.contact_request import ContactRequest

__all__ = [
    "Content",
    "Admin",
    "ContactRequest",
]
