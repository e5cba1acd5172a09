# backend/repositories/product_repository.py
"""Data access for the product catalog.

The repository owns both side effects of a product write: the row in
the ``products`` table and the image file in the :class:`ImageStore`.
The two are not atomic. A failure between them can leave an orphaned
file or a row pointing at a missing file.
"""
import logging
import math
from typing import Any, List, Mapping, Optional

from sqlalchemy.orm import Session

from models.product import Product
from utils.image_store import ImageStore

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("name", "category")
NUMERIC_FIELDS = ("price", "stock")
UPDATABLE_FIELDS = TEXT_FIELDS + NUMERIC_FIELDS


class ProductNotFoundError(LookupError):
    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id!r} not found")
        self.product_id = product_id


def _to_number(value: Any) -> float:
    # Anything that does not read as a finite number degrades to 0
    if value is None or isinstance(value, (list, dict)):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def coerce_price(value: Any) -> float:
    return _to_number(value)


def coerce_stock(value: Any) -> float:
    # Kept as given, fractional or huge values included
    return _to_number(value)


def _to_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _coerce(field: str, value: Any) -> Any:
    if field == "price":
        return coerce_price(value)
    if field == "stock":
        return coerce_stock(value)
    return _to_text(value)


class ProductRepository:
    """Product CRUD over a SQLAlchemy session."""

    def __init__(self, db: Session, images: ImageStore):
        self.db = db
        self.images = images

    def list(self) -> List[Product]:
        return (
            self.db.query(Product)
            .order_by(Product.created_at.desc())
            .all()
        )

    def get(self, product_id: str) -> Product:
        # Ids are 32-char hex strings; anything else cannot exist
        if not product_id or len(product_id) > 32:
            raise ProductNotFoundError(product_id)
        product = self.db.query(Product).filter(Product.id == product_id).first()
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def create(self, fields: Mapping[str, Any], image_path: str) -> Product:
        if not image_path:
            raise ValueError("image_path is required")

        product = Product(
            name=_to_text(fields.get("name")),
            category=_to_text(fields.get("category")),
            price=coerce_price(fields.get("price")),
            stock=coerce_stock(fields.get("stock")),
            image=image_path,
        )
        self.db.add(product)
        self._commit()
        self.db.refresh(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    def update(
        self,
        product_id: str,
        fields: Mapping[str, Any],
        new_image_path: Optional[str] = None,
    ) -> Product:
        product = self.get(product_id)

        for field in UPDATABLE_FIELDS:
            if field in fields:
                setattr(product, field, _coerce(field, fields[field]))

        old_image = None
        if new_image_path:
            old_image = product.image
            product.image = new_image_path

        self._commit()
        # Old file goes only once the row points at the new one
        if old_image and old_image != new_image_path:
            self.images.delete(old_image)
        self.db.refresh(product)
        logger.info("Updated product %s", product.id)
        return product

    def delete(self, product_id: str) -> bool:
        product = self.get(product_id)

        self.images.delete(product.image)
        self.db.delete(product)
        self._commit()
        logger.info("Deleted product %s", product_id)
        return True

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
