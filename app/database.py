import asyncio
import logging
import uuid
from typing import Any, Iterable, List, Optional

from .errors import ProductNotFound, ProductValidationError
from .models import Product, ProductCreate, ProductUpdate

# This file holds the in-memory product collection and its lock.

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5

SEED_PRODUCTS: List[dict] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


def _positive_int(value: Any, default: int) -> int:
    if value is None:
        return default
    try:
        n = int(value)
    except (ValueError, TypeError):
        return default
    return n if n >= 1 else default


class ProductStore:
    """Ordered in-memory product collection.

    Every lookup is a linear scan over the list, which is fine for a demo-sized
    catalogue but is the scaling limit of this store. Mutations run under one
    asyncio lock; reads never await, so they cannot observe a half-applied
    mutation.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = list(products or [])
        self._lock = asyncio.Lock()

    @classmethod
    def seeded(cls) -> "ProductStore":
        return cls(Product(**p) for p in SEED_PRODUCTS)

    def __len__(self) -> int:
        return len(self._products)

    def snapshot(self) -> List[Product]:
        return [p.model_copy() for p in self._products]

    def _index_of(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p.id == product_id:
                return i
        raise ProductNotFound(product_id)

    def _new_id(self) -> str:
        pid = uuid.uuid4().hex
        while any(p.id == pid for p in self._products):
            pid = uuid.uuid4().hex
        return pid

    # ---------------------------
    # Reads
    # ---------------------------
    async def list_products(
        self,
        category: Optional[str] = None,
        q: Optional[str] = None,
        page: Any = None,
        limit: Any = None,
    ) -> List[Product]:
        out = self._products
        if category:
            out = [p for p in out if p.category == category]
        if q:
            term = q.lower()
            out = [p for p in out if term in p.name.lower()]

        page = _positive_int(page, DEFAULT_PAGE)
        limit = _positive_int(limit, DEFAULT_LIMIT)
        start = (page - 1) * limit
        return list(out[start:start + limit])

    async def get_product(self, product_id: str) -> Product:
        return self._products[self._index_of(product_id)]

    # ---------------------------
    # Mutations
    # ---------------------------
    async def insert_product(self, payload: ProductCreate) -> Product:
        if not payload.name or not payload.price:
            raise ProductValidationError()

        async with self._lock:
            product = Product(
                id=self._new_id(),
                name=payload.name,
                description=payload.description or "",
                price=payload.price,
                category=payload.category or "general",
                inStock=True if payload.inStock is None else payload.inStock,
            )
            self._products.append(product)
        logger.debug("inserted product %s", product.id)
        return product

    async def update_product(self, product_id: str, payload: ProductUpdate) -> Product:
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        async with self._lock:
            index = self._index_of(product_id)
            updated = self._products[index].model_copy(update=changes)
            self._products[index] = updated
        logger.debug("updated product %s fields=%s", product_id, sorted(changes))
        return updated

    async def delete_product(self, product_id: str) -> None:
        async with self._lock:
            index = self._index_of(product_id)
            del self._products[index]
        logger.debug("deleted product %s", product_id)
