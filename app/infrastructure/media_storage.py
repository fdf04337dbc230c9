"""Local object storage for uploaded images."""

import os
import uuid
from pathlib import Path
from typing import Optional

import structlog

from app.config import get_settings

settings = get_settings()
logger = structlog.get_logger(__name__)

# Folders the admin forms upload into
MEDIA_FOLDERS = ("events", "news", "authors")
IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "gif", "webp", "svg")


class MediaStorage:
    """Stores files under `<root>/<folder>/` and returns their public URL.

    Every upload gets a fresh name; nothing is deduplicated or removed.
    """

    def __init__(self, root: Optional[str] = None, url_prefix: Optional[str] = None):
        self.root = Path(root or settings.MEDIA_DIR)
        self.url_prefix = (url_prefix or settings.MEDIA_URL_PREFIX).rstrip("/")

    def save(self, folder: str, filename: str, content: bytes) -> str:
        if folder not in MEDIA_FOLDERS:
            raise ValueError(f"Unknown media folder: {folder}")

        safe_name = f"{uuid.uuid4().hex}_{os.path.basename(filename).replace(' ', '_')}"
        target_dir = self.root / folder
        target_dir.mkdir(parents=True, exist_ok=True)
        (target_dir / safe_name).write_bytes(content)

        url = f"{self.url_prefix}/{folder}/{safe_name}"
        logger.info("Media stored", folder=folder, filename=safe_name, size=len(content))
        return url
