"""
Upload intake: validates multipart file attachments and stores them in the
local file area under unique names.

Each endpoint declares which file fields it accepts with a table of
``FileSlot`` entries. Every file of a request is checked against that table
before anything is written, so a rejected request stores nothing.
"""
from __future__ import annotations

import logging
import re
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

from fastapi import UploadFile

from ..core.errors import StoreError, UnsupportedMediaType, ValidationError

logger = logging.getLogger(__name__)

PHOTO_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png"})

_UNSAFE = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True)
class FileSlot:
    """Where files from one form field end up, and which ones are accepted."""
    slot: str
    allowed_types: frozenset[str] | None = None
    many: bool = False
    reject_message: str = "Unsupported file type"


UploadTable = Mapping[str, FileSlot]


@dataclass(frozen=True)
class LocalFileArea:
    root: Path
    url_prefix: str = "/uploads"

    def _path(self, name: str) -> Path:
        # only the basename is honoured so a stored URL cannot leave root
        return self.root / Path(name).name

    def url_for(self, name: str) -> str:
        return f"{self.url_prefix.rstrip('/')}/{name}"

    def put_bytes(self, name: str, data: bytes) -> str:
        p = self._path(name)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)
        return self.url_for(p.name)

    def exists(self, url: str) -> bool:
        return self._path(url).is_file()

    def remove(self, url: str) -> bool:
        p = self._path(url)
        if not p.is_file():
            return False
        p.unlink()
        return True


def unique_name(filename: str | None) -> str:
    base = _UNSAFE.sub("_", Path(filename or "upload").name).strip("._") or "upload"
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}-{base}"


class UploadIntake:
    def __init__(self, area: LocalFileArea, *, max_bytes: int = 10 * 1024 * 1024):
        self.area = area
        self.max_bytes = max_bytes

    async def _read(self, field: str, file: UploadFile, rule: FileSlot) -> bytes:
        if rule.allowed_types is not None and (file.content_type or "").lower() not in rule.allowed_types:
            logger.warning(f"Rejected upload on '{field}': content type {file.content_type!r}")
            raise UnsupportedMediaType(rule.reject_message)
        data = await file.read(self.max_bytes + 1)
        if len(data) > self.max_bytes:
            logger.warning(f"Rejected upload on '{field}': larger than {self.max_bytes} bytes")
            raise ValidationError(f"File too large: {file.filename}")
        return data

    async def intake(self, files: Iterable[tuple[str, UploadFile]], table: UploadTable) -> dict[str, str | list[str]]:
        """Validate then store ``(field, file)`` pairs; returns URLs keyed by slot."""
        accepted: list[tuple[FileSlot, str, bytes]] = []
        for field, file in files:
            rule = table.get(field)
            if rule is None:
                raise ValidationError(f"Unexpected file field: {field}")
            data = await self._read(field, file, rule)
            accepted.append((rule, file.filename or field, data))

        out: dict[str, str | list[str]] = {}
        written: list[str] = []
        try:
            for rule, filename, data in accepted:
                url = self.area.put_bytes(unique_name(filename), data)
                written.append(url)
                if rule.many:
                    out.setdefault(rule.slot, []).append(url)
                else:
                    out[rule.slot] = url
        except OSError as e:
            logger.error(f"Failed to store upload: {e}", exc_info=True)
            for url in written:
                self.area.remove(url)
            raise StoreError("Failed to save file")
        return out

    def remove(self, url: str | None) -> None:
        if url and self.area.remove(url):
            logger.info(f"Removed stored file {url}")


MEMBER_UPLOADS: UploadTable = {
    "passportPhotos": FileSlot(
        "passport_photos",
        allowed_types=PHOTO_TYPES,
        many=True,
        reject_message="Passport photo must be JPG, JPEG, or PNG",
    ),
}

NEWS_UPLOADS: UploadTable = {
    "image": FileSlot("image_url"),
    "video": FileSlot("video_url"),
}
