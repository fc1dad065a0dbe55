from typing import Any, Dict, List, Optional

from .database import ProductStore
from .models import Product, ProductCreate, ProductUpdate

# This file contains the core logic for all API endpoints.

WELCOME_TEXT = "Welcome to the Product API! Go to /api/products to see all products."


async def welcome_logic() -> str:
    return WELCOME_TEXT


# Product reads
async def list_products_logic(
    store: ProductStore,
    category: Optional[str] = None,
    q: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> List[Product]:
    return await store.list_products(category=category, q=q, page=page, limit=limit)


async def get_product_logic(store: ProductStore, product_id: str) -> Product:
    return await store.get_product(product_id)


# Product writes
async def create_product_logic(store: ProductStore, payload: Optional[ProductCreate]) -> Product:
    return await store.insert_product(payload or ProductCreate())


async def update_product_logic(
    store: ProductStore, product_id: str, payload: Optional[ProductUpdate]
) -> Product:
    return await store.update_product(product_id, payload or ProductUpdate())


async def delete_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    await store.delete_product(product_id)
    return {"message": "Product deleted successfully"}
