# backend/models/product.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Float, DateTime
from database import Base


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Model Product
# A single catalog item. Name and category are free text without any
# uniqueness or presence rules; price and stock are already coerced
# to numbers by the repository. `image` holds the public path of the
# uploaded file ("/uploads/<name>").
class Product(Base):
    __tablename__ = "products"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String, nullable=True)
    category = Column(String, nullable=True)

    price = Column(Float, nullable=False, default=0.0)
    stock = Column(Float, nullable=False, default=0.0)

    image = Column(String, nullable=False)

    # Python-side defaults keep sub-second precision on SQLite,
    # listing order depends on it.
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"
