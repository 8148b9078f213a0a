"""Bearer 토큰 발급/검증 서비스입니다. 서명된 클레임만으로 유효성을 판단하며 저장하지 않습니다."""

from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from portfolio.config import settings

ALGORITHM = "HS256"


class TokenError(Exception):
    pass


def _secret() -> str:
    secret = settings.JWT_SECRET
    if not secret:
        raise TokenError("JWT_SECRET not set in environment")
    return secret


def create_access_token(username: str, email: str) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"username": username, "email": email, "exp": expire}
    return jwt.encode(payload, _secret(), algorithm=ALGORITHM)


def decode_token(token: str) -> dict:
    """만료/변조/알고리즘 불일치 토큰은 TokenError로 거부한다."""
    try:
        payload = jwt.decode(token, _secret(), algorithms=[ALGORITHM])
    except JWTError as exc:
        raise TokenError(str(exc)) from exc
    if not payload.get("username"):
        raise TokenError("Invalid token payload")
    return payload
