"""Content 도메인 서비스 레이어입니다. 게시/수정/삭제/검색 규칙과 데이터 접근 흐름을 캡슐화합니다."""

import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy import text
from sqlalchemy.orm import Session

from portfolio.models.content import Content
from portfolio.schemas.content import ContentCreate, ContentFilter, ContentOut, ContentUpdate
from portfolio.services.media_client import MediaClient, MediaError, MediaFileNotFound, is_external_url
from portfolio.utils.search_index import build_match_query

logger = logging.getLogger(__name__)

PAGE_SIZE = 10


class NoContentsFound(Exception):
    """조회는 성공했지만 조건에 맞는 콘텐츠가 없을 때 발생한다."""


class ContentService:
    def __init__(self, db: Session, media: MediaClient):
        self.db = db
        self.media = media

    def _upload_if_local(self, image: Optional[str]) -> str:
        if not image or is_external_url(image):
            return image or ""
        try:
            return self.media.upload_image(image)
        except MediaFileNotFound:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Image file not found")
        except MediaError as exc:
            logger.warning("[content] image upload failed: %s", exc)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not upload image")

    def _resolve_image(self, image: Optional[str]) -> str:
        try:
            return self.media.build_url(image)
        except MediaError as exc:
            logger.warning("[content] image url build failed: %s", exc)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not resolve image")

    def _to_out(self, content: Content, score: Optional[float] = None) -> ContentOut:
        out = ContentOut.model_validate(content)
        out.image = self._resolve_image(content.image)
        out.score = score
        return out

    def _get_or_404(self, content_id: int, detail: str = "Blog not found") -> Content:
        content = self.db.query(Content).filter(Content.id == content_id).first()
        if not content:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
        return content

    def add(self, data: ContentCreate) -> ContentOut:
        values = data.model_dump()
        values["image"] = self._upload_if_local(values.get("image"))
        content = Content(**values)
        self.db.add(content)
        self.db.commit()
        self.db.refresh(content)
        logger.info("[content] published id=%s type=%s", content.id, content.type)
        return self._to_out(content)

    def update(self, content_id: int, data: ContentUpdate) -> ContentOut:
        content = self._get_or_404(content_id, detail="Could not find blog with this ID")
        fields = data.model_dump(exclude_unset=True)
        if "image" in fields:
            fields["image"] = self._upload_if_local(fields["image"])
        for key, value in fields.items():
            setattr(content, key, value)
        # blog_search 동기화는 UPDATE 트리거가 같은 문장 안에서 처리한다.
        self.db.commit()
        self.db.refresh(content)
        logger.info("[content] updated id=%s", content.id)
        return self._to_out(content)

    def delete(self, content_id: int) -> None:
        content = self._get_or_404(content_id, detail="Could not find blog with this ID")
        self.db.delete(content)
        self.db.commit()
        logger.info("[content] deleted id=%s", content_id)

    def get_by_id(self, content_id: int) -> ContentOut:
        return self._to_out(self._get_or_404(content_id))

    def get_contents(self, filters: ContentFilter, page: int) -> List[ContentOut]:
        offset = (page - 1) * PAGE_SIZE
        if filters.title and filters.title.strip():
            results = self._search(filters, offset)
        else:
            query = self.db.query(Content).filter(Content.language == filters.language)
            if filters.category:
                query = query.filter(Content.type == filters.category)
            if filters.featured is not None:
                query = query.filter(Content.featured == filters.featured)
            rows = (
                query.order_by(Content.created_at.desc(), Content.id.desc())
                .offset(offset)
                .limit(PAGE_SIZE)
                .all()
            )
            results = [self._to_out(row) for row in rows]

        if not results:
            raise NoContentsFound("no contents found")
        return results

    def _search(self, filters: ContentFilter, offset: int) -> List[ContentOut]:
        conditions = ["blog_search MATCH :match", "blog_data.language = :language"]
        params = {
            "match": build_match_query(filters.title),
            "language": filters.language,
            "limit": PAGE_SIZE,
            "offset": offset,
        }
        if filters.category:
            conditions.append("blog_data.type = :category")
            params["category"] = filters.category
        if filters.featured is not None:
            conditions.append("blog_data.featured = :featured")
            params["featured"] = filters.featured

        sql = text(
            "SELECT blog_data.id AS id, bm25(blog_search) AS score "
            "FROM blog_search "
            "JOIN blog_data ON blog_data.id = blog_search.rowid "
            f"WHERE {' AND '.join(conditions)} "
            "ORDER BY score ASC "
            "LIMIT :limit OFFSET :offset"
        )
        ranked = [(int(row.id), float(row.score)) for row in self.db.execute(sql, params)]
        if not ranked:
            return []

        by_id = {
            row.id: row
            for row in self.db.query(Content).filter(Content.id.in_([cid for cid, _ in ranked])).all()
        }
        return [self._to_out(by_id[cid], score=score) for cid, score in ranked if cid in by_id]
