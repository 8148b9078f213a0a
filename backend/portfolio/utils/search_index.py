"""blog_data 전문 검색 인덱스(FTS5) 관리 유틸리티."""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)

SEARCH_TABLE = "blog_search"

# 콘텐츠 행과 인덱스 행은 트리거를 통해 같은 문장(트랜잭션) 안에서 함께 변경된다.
SEARCH_INDEX_DDL = (
    """
    CREATE VIRTUAL TABLE IF NOT EXISTS blog_search USING fts5(
        title,
        body,
        content='blog_data',
        content_rowid='id',
        tokenize='porter'
    )
    """,
    """
    CREATE TRIGGER IF NOT EXISTS blog_data_ai AFTER INSERT ON blog_data BEGIN
        INSERT INTO blog_search(rowid, title, body)
            VALUES (new.id, new.title, new.body);
    END
    """,
    """
    CREATE TRIGGER IF NOT EXISTS blog_data_au AFTER UPDATE ON blog_data BEGIN
        INSERT INTO blog_search(blog_search, rowid, title, body)
            VALUES ('delete', old.id, old.title, old.body);
        INSERT INTO blog_search(rowid, title, body)
            VALUES (new.id, new.title, new.body);
    END
    """,
    """
    CREATE TRIGGER IF NOT EXISTS blog_data_ad AFTER DELETE ON blog_data BEGIN
        INSERT INTO blog_search(blog_search, rowid, title, body)
            VALUES ('delete', old.id, old.title, old.body);
    END
    """,
)

REBUILD_SQL = "INSERT INTO blog_search(blog_search) VALUES ('rebuild')"


def create_search_index_objects(conn: Connection) -> None:
    for statement in SEARCH_INDEX_DDL:
        conn.execute(text(statement))


def drop_search_index_objects(conn: Connection) -> None:
    conn.execute(text(f"DROP TABLE IF EXISTS {SEARCH_TABLE}"))


def ensure_search_index(engine: Engine) -> None:
    """FTS 테이블/트리거를 보장하고, 기존 콘텐츠 기준으로 인덱스를 재구성한다."""
    with engine.begin() as conn:
        create_search_index_objects(conn)
        # external content 테이블은 rowid 조회가 원본 테이블을 읽으므로 누락분 비교 대신 rebuild 한다.
        conn.execute(text(REBUILD_SQL))
    logger.info("search index %s rebuilt from blog_data", SEARCH_TABLE)


def build_match_query(keyword: str) -> str:
    """제목 컬럼 접두 검색용 FTS5 MATCH 식을 만든다. (예: title:"fast"*)"""
    escaped = keyword.strip().replace('"', '""')
    return f'title:"{escaped}"*'
