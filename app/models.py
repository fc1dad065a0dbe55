# app/models.py
from pydantic import BaseModel, ConfigDict
from typing import Any, Optional


class Product(BaseModel):
    id: str
    name: str
    description: str = ""
    price: Any
    category: str = "general"
    inStock: bool = True


class ProductCreate(BaseModel):
    # presence of name/price is checked by the store, not the schema
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    description: Optional[str] = None
    price: Any = None
    category: Optional[str] = None
    inStock: Optional[bool] = None


class ProductUpdate(BaseModel):
    """Partial overlay applied on top of an existing product.

    ``id`` is not a field here, so an update can never change a product's identity.
    """
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    description: Optional[str] = None
    price: Any = None
    category: Optional[str] = None
    inStock: Optional[bool] = None
