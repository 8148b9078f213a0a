"""Contact Request API 라우터입니다. 클라이언트 IP를 식별해 서비스 레이어로 위임합니다."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from portfolio.database import get_db
from portfolio.schemas.contact import ContactRequestCreate, ContactRequestOut, ContactSubmitResponse
from portfolio.services.contact_service import ContactService
from portfolio.services.telegram_client import TelegramClient, get_telegram_client

router = APIRouter(tags=["requests"])


def get_contact_service(
    db: Session = Depends(get_db),
    notifier: TelegramClient = Depends(get_telegram_client),
) -> ContactService:
    return ContactService(db, notifier)


def client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for", "")
    if forwarded.strip():
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@router.post("/request", response_model=ContactSubmitResponse)
def submit_request(
    data: ContactRequestCreate,
    request: Request,
    service: ContactService = Depends(get_contact_service),
):
    row = service.submit(client_ip(request), data)
    return ContactSubmitResponse(
        message="Your request was sent successfully",
        request=ContactRequestOut.model_validate(row),
    )
