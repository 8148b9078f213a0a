"""이미지 호스팅(Cloudinary) 클라이언트입니다. 업로드와 공개 URL 생성을 외부 서비스에 위임합니다."""

import logging
import os
from typing import Optional
from urllib.parse import urlparse

import cloudinary.exceptions
import cloudinary.uploader
import cloudinary.utils

from portfolio.config import settings

logger = logging.getLogger(__name__)


class MediaError(Exception):
    pass


class MediaFileNotFound(MediaError):
    pass


def is_external_url(value: Optional[str]) -> bool:
    return bool(value) and value.lower().startswith(("http://", "https://"))


def parse_cloudinary_url(url: str) -> dict:
    """cloudinary://<api_key>:<api_secret>@<cloud_name> 형식을 자격 증명 dict로 변환한다."""
    parsed = urlparse(url or "")
    if parsed.scheme != "cloudinary" or "@" not in parsed.netloc:
        raise MediaError("CLOUDINARY_URL is not configured")
    userinfo, cloud_name = parsed.netloc.rsplit("@", 1)
    api_key, _, api_secret = userinfo.partition(":")
    if not cloud_name or not api_key or not api_secret:
        raise MediaError("CLOUDINARY_URL is missing credentials")
    return {"cloud_name": cloud_name, "api_key": api_key, "api_secret": api_secret}


class MediaClient:
    """전역 SDK 설정 대신 인스턴스가 보유한 자격 증명으로 호출한다."""

    def __init__(self, cloudinary_url: str, folder: str = "golang_uploads"):
        self.cloudinary_url = cloudinary_url
        self.folder = folder
        self._credentials: Optional[dict] = None

    def _options(self) -> dict:
        if self._credentials is None:
            self._credentials = parse_cloudinary_url(self.cloudinary_url)
        return dict(self._credentials)

    def upload_image(self, path: str) -> str:
        if not path or not os.path.isfile(path):
            raise MediaFileNotFound(f"image file not found: {path}")
        options = self._options()
        try:
            result = cloudinary.uploader.upload(
                path,
                folder=self.folder,
                resource_type="image",
                **options,
            )
        except cloudinary.exceptions.Error as exc:
            logger.warning("[media] upload failed for %s: %s", path, exc)
            raise MediaError(str(exc)) from exc
        url = result.get("secure_url") or result.get("url")
        if not url:
            raise MediaError("upload response did not contain a URL")
        return url

    def build_url(self, public_id: Optional[str]) -> str:
        if not public_id:
            return ""
        if is_external_url(public_id):
            return public_id
        options = self._options()
        url, _ = cloudinary.utils.cloudinary_url(
            public_id,
            cloud_name=options["cloud_name"],
            secure=True,
        )
        return url


def get_media_client() -> MediaClient:
    return MediaClient(settings.CLOUDINARY_URL, folder=settings.MEDIA_UPLOAD_FOLDER)
