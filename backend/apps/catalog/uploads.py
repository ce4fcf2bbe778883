import os
import re
import uuid
from typing import Any, List, Optional

from django.conf import settings
from django.core.files.storage import Storage, default_storage

from apps.common import get_logger

logger = get_logger(__name__).bind(component="catalog", layer="uploads")

ALLOWED_IMAGE_TYPES = re.compile(r"jpeg|jpg|png|gif|webp|avif")


def max_image_bytes() -> int:
    return int(getattr(settings, "PRODUCT_IMAGE_MAX_BYTES", 10 * 1024 * 1024))


def image_errors(upload: Any) -> List[str]:
    """Both the file extension and the declared MIME type must name an image type."""
    errors: List[str] = []
    ext = os.path.splitext(getattr(upload, "name", "") or "")[1].lower()
    content_type = (getattr(upload, "content_type", "") or "").lower()
    if not (ALLOWED_IMAGE_TYPES.search(ext) and ALLOWED_IMAGE_TYPES.search(content_type)):
        errors.append("Only image files are allowed (jpeg, jpg, png, gif, webp, avif).")
    size = getattr(upload, "size", 0) or 0
    if size > max_image_bytes():
        errors.append(f"Image must not exceed {max_image_bytes()} bytes.")
    return errors


class ProductImageStore:
    """Stores uploads under MEDIA_ROOT with collision-free generated names."""

    def __init__(self, storage: Optional[Storage] = None):
        self.storage = storage or default_storage

    def save(self, upload: Any) -> str:
        ext = os.path.splitext(getattr(upload, "name", "") or "")[1].lower()
        name = self.storage.save(f"{uuid.uuid4().hex}{ext}", upload)
        logger.info("Product image stored", image=name)
        return name

    def delete(self, name: str) -> None:
        if name and self.storage.exists(name):
            self.storage.delete(name)
            logger.info("Product image removed", image=name)
