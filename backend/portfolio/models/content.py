"""블로그/프로젝트 콘텐츠의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, event
from sqlalchemy.sql import func
from portfolio.database import Base
from portfolio.utils.search_index import create_search_index_objects, drop_search_index_objects


class Content(Base):
    __tablename__ = "blog_data"

    id = Column(Integer, primary_key=True, autoincrement=True)
    language = Column(String(5), nullable=False, default="en")  # en/ru/uz
    type = Column(String(20), nullable=False, default="blog")  # blog/project
    image = Column(String(500), nullable=False, default="")
    title = Column(String(300), nullable=False)
    body = Column(Text, nullable=False)
    meta_tag = Column(String(300))
    created_at = Column(DateTime, server_default=func.now())
    featured = Column(Boolean, nullable=False, default=False)


# blog_search(FTS5)는 메타데이터 밖의 가상 테이블이므로 blog_data 생성/삭제에 맞춰 함께 관리한다.
@event.listens_for(Content.__table__, "after_create")
def _create_search_index(target, connection, **kw):
    create_search_index_objects(connection)


@event.listens_for(Content.__table__, "after_drop")
def _drop_search_index(target, connection, **kw):
    drop_search_index_objects(connection)
