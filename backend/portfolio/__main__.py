"""`python -m portfolio`로 API 서버를 실행합니다."""

import logging
import sys

import uvicorn

from portfolio.config import settings


def main():
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        stream=sys.stdout,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("portfolio.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    main()
