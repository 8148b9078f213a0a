from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader
from portfolio.services.token_service import TokenError, decode_token

# Authorization: <token>  ("Bearer <token>" 형식도 허용)
token_header = APIKeyHeader(name="Authorization", auto_error=False)


def _strip_scheme(raw: str) -> str:
    value = raw.strip()
    if value.lower().startswith("bearer "):
        return value[7:].strip()
    return value


def get_current_admin(authorization: str | None = Depends(token_header)) -> dict:
    if not authorization or not _strip_scheme(authorization):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="You did not input the token",
        )
    try:
        return decode_token(_strip_scheme(authorization))
    except TokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
