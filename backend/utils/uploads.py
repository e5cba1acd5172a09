# backend/utils/uploads.py
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from repositories.product_repository import UPDATABLE_FIELDS
from utils.image_store import ImageStore, get_image_store

logger = logging.getLogger(__name__)

# Name of the file part carrying the product picture
IMAGE_FIELD = "image"

FORM_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


@dataclass
class ProductUpload:
    """Text fields of a product submission plus the stored image, if any."""
    fields: Dict[str, Any] = field(default_factory=dict)
    image_path: Optional[str] = None
    images: Optional[ImageStore] = None

    def discard_image(self) -> None:
        # Used when the request fails before a record references the file
        if self.image_path and self.images is not None:
            self.images.delete(self.image_path)
            self.image_path = None


async def read_product_upload(
    request: Request,
    images: ImageStore = Depends(get_image_store),
) -> ProductUpload:
    upload = ProductUpload(images=images)
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_TYPES):
        form = await request.form()
        for key, value in form.multi_items():
            if key == IMAGE_FIELD:
                # A form sent without a chosen file still carries an empty part
                if isinstance(value, UploadFile) and value.filename and upload.image_path is None:
                    upload.image_path = await run_in_threadpool(
                        images.save, value.file, value.filename
                    )
            elif key in UPDATABLE_FIELDS and not isinstance(value, UploadFile):
                upload.fields[key] = value

    elif content_type.startswith("application/json"):
        raw = await request.body()
        if raw:
            try:
                payload = json.loads(raw)
            except ValueError:
                raise HTTPException(status_code=400, detail="Malformed JSON body")
            if isinstance(payload, dict):
                upload.fields = {k: v for k, v in payload.items() if k in UPDATABLE_FIELDS}

    if upload.image_path:
        logger.debug("Upload stored at %s", upload.image_path)
    return upload
