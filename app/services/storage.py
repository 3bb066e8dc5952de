"""
Photo file storage.

Files are written under ``UPLOAD_DIR/<yyyy>/<mm>/<uuid>.<ext>`` and served
from the static mount. Handlers get the storage through the ``get_storage``
dependency so it can be replaced, in tests or by a hosted bucket.
"""
import logging
import shutil
import uuid
from datetime import datetime
from pathlib import Path

from fastapi import UploadFile

from app.core.config import settings
from app.core.errors import StorageError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "gif", "webp", "heic"}

class LocalPhotoStorage:
    def __init__(self, base_dir: str, url_prefix: str, max_bytes: int):
        self.base_dir = Path(base_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.max_bytes = max_bytes

    def validate(self, upload: UploadFile) -> str:
        if upload is None or not upload.filename:
            raise StorageError("upload.empty")
        ext = upload.filename.rsplit(".", 1)[-1].lower() if "." in upload.filename else ""
        content_type = upload.content_type or ""
        if ext not in ALLOWED_EXTENSIONS or not content_type.startswith("image/"):
            raise StorageError("upload.invalid_type")

        upload.file.seek(0, 2)
        size = upload.file.tell()
        upload.file.seek(0)
        if size == 0:
            raise StorageError("upload.empty")
        if size > self.max_bytes:
            raise StorageError("upload.too_large")
        return ext

    def save(self, upload: UploadFile, now: datetime = None) -> str:
        """Stores the upload and returns its public URL."""
        ext = self.validate(upload)
        year_month = (now or datetime.utcnow()).strftime("%Y/%m")
        target_dir = self.base_dir / year_month
        target_dir.mkdir(parents=True, exist_ok=True)

        unique_name = f"{uuid.uuid4()}.{ext}"
        with open(target_dir / unique_name, "wb") as buffer:
            shutil.copyfileobj(upload.file, buffer)

        logger.info("Stored upload %s as %s/%s", upload.filename, year_month, unique_name)
        return f"{self.url_prefix}/{year_month}/{unique_name}"

    def delete(self, url: str) -> bool:
        """Removes a file previously returned by ``save``. Unknown URLs are ignored."""
        if not url or not url.startswith(self.url_prefix + "/"):
            return False
        relative = url[len(self.url_prefix) + 1:]
        base = self.base_dir.resolve()
        target = (base / relative).resolve()
        if base not in target.parents or not target.is_file():
            return False
        target.unlink()
        logger.info("Removed upload %s", relative)
        return True

def get_storage() -> LocalPhotoStorage:
    return LocalPhotoStorage(
        settings.UPLOAD_DIR,
        settings.UPLOAD_URL_PREFIX,
        settings.MAX_UPLOAD_MB * 1024 * 1024,
    )
