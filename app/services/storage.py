import logging
import os
import uuid
from flask import current_app
from werkzeug.utils import secure_filename
from app.errors import DomainError

logger = logging.getLogger(__name__)


class ImageStorageError(DomainError):
    pass


class ImageStorage:
    """Persists an uploaded image and returns the reference stored on the item."""

    def save(self, file) -> str:
        raise NotImplementedError


class LocalImageStorage(ImageStorage):
    def __init__(self, upload_folder=None, url_prefix="/uploads"):
        self._upload_folder = upload_folder
        self.url_prefix = url_prefix.rstrip("/")

    @property
    def upload_folder(self) -> str:
        return self._upload_folder or current_app.config["UPLOAD_FOLDER"]

    def _allowed(self, filename: str) -> bool:
        allowed = current_app.config.get("ALLOWED_IMAGE_EXTENSIONS", set())
        return "." in filename and filename.rsplit(".", 1)[1].lower() in allowed

    def save(self, file) -> str:
        filename = secure_filename(file.filename or "")
        if not filename or not self._allowed(filename):
            raise ImageStorageError("Unsupported image type")
        stored_name = f"{uuid.uuid4().hex}_{filename}"
        os.makedirs(self.upload_folder, exist_ok=True)
        file.save(os.path.join(self.upload_folder, stored_name))
        logger.info("Stored image %s", stored_name)
        return f"{self.url_prefix}/{stored_name}"
