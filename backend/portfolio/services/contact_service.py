"""Contact Intake 도메인 서비스 레이어입니다. 일일 요청 한도, 저장, 관리자 알림 흐름을 캡슐화합니다."""

import logging

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from portfolio.config import settings
from portfolio.models.contact_request import ContactRequest
from portfolio.schemas.contact import ContactRequestCreate
from portfolio.services.telegram_client import TelegramClient, TelegramError

logger = logging.getLogger(__name__)

MESSAGE_TEMPLATE = (
    "📩 New portfolio request\n\n"
    "👤 {name} {lastname}\n"
    "📞 {phone}\n"
    "💬 Telegram: {telegram}\n"
    "📝 {description}\n"
    "🌐 IP: {ip}"
)


class ContactService:
    def __init__(self, db: Session, notifier: TelegramClient):
        self.db = db
        self.notifier = notifier

    @property
    def daily_limit(self) -> int:
        return int(settings.CONTACT_DAILY_LIMIT)

    def count_today(self, ip: str) -> int:
        return (
            self.db.query(func.count(ContactRequest.id))
            .filter(
                ContactRequest.ip == ip,
                # CURRENT_TIMESTAMP(UTC) 기준 같은 날짜인지 비교한다.
                func.date(ContactRequest.created_at) == func.date("now"),
            )
            .scalar()
            or 0
        )

    def can_request(self, ip: str) -> bool:
        return self.count_today(ip) < self.daily_limit

    def save(self, ip: str, data: ContactRequestCreate) -> ContactRequest:
        if not data.telegram.startswith("@"):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="the telegram username should start with '@'",
            )
        row = ContactRequest(**data.model_dump(), ip=ip)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row

    def notify(self, row: ContactRequest) -> None:
        message = MESSAGE_TEMPLATE.format(
            name=row.name,
            lastname=row.lastname,
            phone=row.phone,
            telegram=row.telegram,
            description=row.description or "",
            ip=row.ip,
        )
        try:
            self.notifier.send_message(message)
        except TelegramError as exc:
            # 저장된 요청은 되돌리지 않는다.
            logger.warning("[contact] notification failed for request id=%s: %s", row.id, exc)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to send Telegram notification",
            )

    def submit(self, ip: str, data: ContactRequestCreate) -> ContactRequest:
        if not self.can_request(ip):
            logger.info("[contact] daily limit reached for ip=%s", ip)
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=f"Daily request limit reached ({self.daily_limit} per day)",
            )
        row = self.save(ip, data)
        self.notify(row)
        return row
