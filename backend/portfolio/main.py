"""FastAPI 애플리케이션 진입점. 미들웨어, 예외 처리기, API 라우터를 등록합니다."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from portfolio.config import settings
from portfolio.database import Base, engine
import portfolio.models  # noqa: F401 - 모델 import로 metadata 등록
from portfolio.routers import admin, contact, contents
from portfolio.utils.search_index import ensure_search_index

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Portfolio API",
    description="This is the portfolio back-end",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(contents.router)
app.include_router(contact.router)
app.include_router(admin.router)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Database error"})


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)
    ensure_search_index(engine)
    logger.info("signup route %s", "enabled" if settings.SHOW_SIGNUP else "hidden")


@app.get("/portfolio")
def hello():
    return {"message": "Hello world"}
