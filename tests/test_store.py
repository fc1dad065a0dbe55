# tests/test_store.py
import asyncio

import pytest

from app.database import ProductStore
from app.errors import ProductNotFound, ProductValidationError
from app.models import ProductCreate, ProductUpdate


def run(coro):
    return asyncio.run(coro)


def test_seeded_store_has_three_products():
    store = ProductStore.seeded()
    assert len(store) == 3
    assert [p.name for p in store.snapshot()] == ["Laptop", "Smartphone", "Coffee Maker"]


def test_insert_then_get():
    store = ProductStore()
    p = run(store.insert_product(ProductCreate(name="Desk", price=120, inStock=False)))
    assert p.inStock is False
    assert p.category == "general"
    assert run(store.get_product(p.id)) == p


def test_insert_validation():
    store = ProductStore()
    with pytest.raises(ProductValidationError) as exc:
        run(store.insert_product(ProductCreate(name="Desk")))
    assert exc.value.status_code == 400
    assert len(store) == 0


def test_list_paging_past_end_is_empty():
    store = ProductStore.seeded()
    assert run(store.list_products(page=2)) == []
    assert [p.id for p in run(store.list_products(page="2", limit="1"))] == ["2"]


def test_list_non_positive_paging_uses_defaults():
    store = ProductStore.seeded()
    assert len(run(store.list_products(page=0, limit=-3))) == 3


def test_list_has_no_limit_ceiling():
    store = ProductStore()
    for i in range(12):
        run(store.insert_product(ProductCreate(name=f"p{i}", price=1)))
    assert len(run(store.list_products(limit=100))) == 12


def test_update_overlays_set_fields_only():
    store = ProductStore.seeded()
    updated = run(store.update_product("3", ProductUpdate(inStock=True)))
    assert updated.inStock is True
    assert updated.name == "Coffee Maker"
    assert updated.price == 50


def test_update_ignores_nulls():
    store = ProductStore.seeded()
    updated = run(store.update_product("1", ProductUpdate(name=None, price=5)))
    assert updated.name == "Laptop"
    assert updated.price == 5


def test_missing_ids_raise_not_found():
    store = ProductStore.seeded()
    for coro in (store.get_product("x"), store.update_product("x", ProductUpdate()),
                 store.delete_product("x")):
        with pytest.raises(ProductNotFound) as exc:
            run(coro)
        assert exc.value.product_id == "x"
        assert exc.value.message == "Product not found"


def test_delete_keeps_relative_order():
    store = ProductStore.seeded()
    run(store.delete_product("1"))
    assert [p.id for p in store.snapshot()] == ["2", "3"]


def test_snapshot_is_a_copy():
    store = ProductStore.seeded()
    snap = store.snapshot()
    snap[0].name = "Changed"
    snap.pop()
    assert len(store) == 3
    assert run(store.get_product("1")).name == "Laptop"
