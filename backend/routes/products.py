# backend/routes/products.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database import get_db
from repositories.product_repository import ProductRepository, ProductNotFoundError
from schemas.product import ProductOut, ProductMessage, MessageResponse
from utils.access import authorize_request
from utils.image_store import ImageStore, get_image_store
from utils.uploads import ProductUpload, read_product_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])


def get_repository(
    db: Session = Depends(get_db),
    images: ImageStore = Depends(get_image_store),
) -> ProductRepository:
    return ProductRepository(db, images)


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Product not found")


# =========================
# PRODUCT LIST
# =========================
@router.get("", response_model=List[ProductOut])
def list_products(repo: ProductRepository = Depends(get_repository)):
    try:
        products = repo.list()
    except Exception:
        logger.exception("Listing products failed")
        raise HTTPException(status_code=500, detail="Error fetching products")
    return [ProductOut.model_validate(p) for p in products]


# =========================
# SINGLE PRODUCT
# =========================
@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, repo: ProductRepository = Depends(get_repository)):
    try:
        product = repo.get(product_id)
    except ProductNotFoundError:
        raise _not_found()
    except Exception:
        logger.exception("Fetching product %s failed", product_id)
        raise HTTPException(status_code=500, detail="Error fetching product")
    return ProductOut.model_validate(product)


# =========================
# CREATE (multipart, image required)
# =========================
@router.post("", response_model=ProductMessage, dependencies=[Depends(authorize_request)])
def create_product(
    upload: ProductUpload = Depends(read_product_upload),
    repo: ProductRepository = Depends(get_repository),
):
    if not upload.image_path:
        raise HTTPException(status_code=400, detail="Image required")

    try:
        product = repo.create(upload.fields, upload.image_path)
    except Exception:
        logger.exception("Creating product failed")
        upload.discard_image()
        raise HTTPException(status_code=500, detail="Error creating product")

    return ProductMessage(message="Product created", product=ProductOut.model_validate(product))


# =========================
# PARTIAL UPDATE (optionally replaces the image)
# =========================
@router.put("/{product_id}", response_model=ProductMessage, dependencies=[Depends(authorize_request)])
def update_product(
    product_id: str,
    upload: ProductUpload = Depends(read_product_upload),
    repo: ProductRepository = Depends(get_repository),
):
    try:
        product = repo.update(product_id, upload.fields, upload.image_path)
    except ProductNotFoundError:
        upload.discard_image()
        raise _not_found()
    except Exception:
        logger.exception("Updating product %s failed", product_id)
        upload.discard_image()
        raise HTTPException(status_code=500, detail="Error updating product")

    return ProductMessage(message="Product updated", product=ProductOut.model_validate(product))


# =========================
# DELETE
# =========================
@router.delete("/{product_id}", response_model=MessageResponse, dependencies=[Depends(authorize_request)])
def delete_product(product_id: str, repo: ProductRepository = Depends(get_repository)):
    try:
        repo.delete(product_id)
    except ProductNotFoundError:
        raise _not_found()
    except Exception:
        logger.exception("Deleting product %s failed", product_id)
        raise HTTPException(status_code=500, detail="Error deleting product")
    return MessageResponse(message="Product deleted")
