"""SQLAlchemy 엔진/세션 팩토리와 요청 단위 세션 의존성을 제공합니다."""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from portfolio.config import settings


def _connect_args(url: str, auth_token: str = "") -> dict:
    # Turso(libsql) 인증 토큰은 sqlite+libsql:// 드라이버에만 전달한다.
    if url.startswith("sqlite+libsql"):
        return {"auth_token": auth_token} if auth_token else {}
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    connect_args=_connect_args(settings.DATABASE_URL, settings.DATABASE_AUTH_TOKEN),
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
