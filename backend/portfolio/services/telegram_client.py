"""관리자 알림용 Telegram Bot API 클라이언트입니다."""

import logging

import httpx

from portfolio.config import settings

logger = logging.getLogger(__name__)


class TelegramError(Exception):
    pass


class TelegramClient:
    def __init__(self, bot_token: str, chat_id: str, base_url: str = "https://api.telegram.org", timeout: float = 10.0):
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _api_url(self, method: str) -> str:
        return f"{self.base_url}/bot{self.bot_token}/{method}"

    def send_message(self, message: str) -> dict:
        if not self.bot_token or not self.chat_id:
            raise TelegramError("BOT_TOKEN or ADMIN_CHAT_ID not set")
        try:
            response = httpx.post(
                self._api_url("sendMessage"),
                data={"chat_id": self.chat_id, "text": message},
                timeout=float(self.timeout),
            )
            response.raise_for_status()
            result = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("[telegram] sendMessage failed: %s", exc)
            raise TelegramError(str(exc)) from exc
        logger.info("[telegram] response=%s", response.text)
        return result


def get_telegram_client() -> TelegramClient:
    return TelegramClient(
        settings.BOT_TOKEN,
        settings.ADMIN_CHAT_ID,
        base_url=settings.TELEGRAM_API_BASE_URL,
        timeout=settings.TELEGRAM_TIMEOUT_SECONDS,
    )
