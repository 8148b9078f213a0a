"""환경 변수 기반 애플리케이션 설정을 중앙에서 관리합니다."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./portfolio.db"
    # libsql/Turso 드라이버용 인증 토큰 (비어있으면 사용하지 않음)
    DATABASE_AUTH_TOKEN: str = ""
    ALLOWED_ORIGINS: List[str] = ["*"]
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # JWT
    JWT_SECRET: str = ""
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 120
    PASSWORD_HASH_SCHEME: str = "pbkdf2_sha256"

    # Admin signup route is hidden unless explicitly enabled
    SHOW_SIGNUP: bool = False

    # Contact request notifications (Telegram Bot API)
    BOT_TOKEN: str = ""
    ADMIN_CHAT_ID: str = ""
    TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"
    TELEGRAM_TIMEOUT_SECONDS: float = 10.0
    CONTACT_DAILY_LIMIT: int = 2

    # Image hosting (cloudinary://<api_key>:<api_secret>@<cloud_name>)
    CLOUDINARY_URL: str = ""
    MEDIA_UPLOAD_FOLDER: str = "golang_uploads"

    class Config:
        # 실행 cwd와 무관하게 backend/.env를 로드한다.
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
