# backend/schemas/product.py
from datetime import datetime
from pydantic import AliasChoices, BaseModel, Field, ConfigDict
from typing import Optional


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


# Full product representation, serialized with the public field names
# ({ _id, name, category, price, stock, image, createdAt, updatedAt }).
# Both spellings are accepted on input since FastAPI re-validates the
# dumped (aliased) model.
class ProductOut(ORMBase):
    id: str = Field(
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    name: Optional[str] = None
    category: Optional[str] = None
    price: float = 0
    stock: float = 0
    image: str
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )


class ProductMessage(BaseModel):
    message: str
    product: ProductOut


class MessageResponse(BaseModel):
    message: str
