# tests/test_sdk.py
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.database import ProductStore
from app.main import create_app
from sdk.products import ProductAPIError, ProductClient


def make_sdk(token="mysecrettoken"):
    app = create_app(store=ProductStore.seeded(), settings=Settings())
    return ProductClient(base_url="http://testserver", token=token, session=TestClient(app))


def test_welcome_and_list():
    c = make_sdk()
    assert c.welcome().startswith("Welcome to the Product API!")
    assert [p["name"] for p in c.list_products(category="kitchen")] == ["Coffee Maker"]
    assert [p["name"] for p in c.list_products(q="phone")] == ["Smartphone"]
    assert [p["id"] for p in c.list_products(page=2, limit=2)] == ["3"]


def test_crud_round_trip():
    c = make_sdk()
    created = c.create_product("Toaster", 40, description="Two slots", category="kitchen", in_stock=False)
    assert created["inStock"] is False
    assert c.get_product(created["id"]) == created

    updated = c.update_product(created["id"], price=35, in_stock=True)
    assert updated == {**created, "price": 35, "inStock": True}

    assert c.delete_product(created["id"]) == {"message": "Product deleted successfully"}
    with pytest.raises(ProductAPIError) as exc:
        c.get_product(created["id"])
    assert exc.value.status_code == 404
    assert exc.value.message == "Product not found"


def test_validation_error_surfaces():
    c = make_sdk()
    with pytest.raises(ProductAPIError) as exc:
        c.create_product("Nothing", 0)
    assert exc.value.status_code == 400


def test_missing_token_is_unauthorized():
    c = make_sdk(token=None)
    assert len(c.list_products()) == 3
    with pytest.raises(ProductAPIError) as exc:
        c.delete_product("1")
    assert exc.value.status_code == 401
    assert exc.value.message == "Unauthorized"
