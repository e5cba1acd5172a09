# backend/utils/image_store.py
import logging
import shutil
import time
import uuid
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Optional

from config import settings

logger = logging.getLogger(__name__)

# Public URL prefix under which the store directory is mounted
URL_PREFIX = "/uploads"


class ImageStore:
    """Filesystem directory holding uploaded product images.

    Files are stored flat inside ``root`` and referenced from the
    database by their public path (``/uploads/<file name>``).
    """

    def __init__(self, root: Path, url_prefix: str = URL_PREFIX):
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")
        self.root.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def generate_name(original_filename: Optional[str]) -> str:
        # <ms timestamp>_<random token><ext>; the token keeps two uploads
        # landing in the same millisecond apart
        ext = PurePosixPath(original_filename or "").suffix.lower()
        return f"{int(time.time() * 1000)}_{uuid.uuid4().hex}{ext}"

    def save(self, stream: BinaryIO, original_filename: Optional[str]) -> str:
        """Copy ``stream`` into the store and return its public path."""
        filename = self.generate_name(original_filename)
        target = self.root / filename
        with open(target, "wb") as buffer:
            shutil.copyfileobj(stream, buffer)
        logger.debug("Stored image %s (original name %r)", target, original_filename)
        return f"{self.url_prefix}/{filename}"

    def path_for(self, relative_path: str) -> Path:
        # Only the final component is honoured, "../" cannot leave the store
        normalized = relative_path.replace("\\", "/")
        name = PurePosixPath(normalized).name
        # "/uploads/" names a directory, not a stored file
        if not name or normalized.endswith("/") or name in (".", ".."):
            raise ValueError(f"Not an image path: {relative_path!r}")
        return self.root / name

    def delete(self, relative_path: Optional[str]) -> bool:
        """Remove a stored image. A missing file is not an error.

        Returns True if a file was removed.
        """
        if not relative_path:
            return False
        path = self.path_for(relative_path)
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug("Image %s already gone", path)
            return False
        logger.debug("Deleted image %s", path)
        return True


_store: Optional[ImageStore] = None


def get_image_store() -> ImageStore:
    # Created lazily so the directory follows the active settings
    global _store
    if _store is None or _store.root != Path(settings.UPLOAD_DIR):
        _store = ImageStore(settings.UPLOAD_DIR)
    return _store
