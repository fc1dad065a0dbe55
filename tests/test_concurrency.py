# tests/test_concurrency.py
import asyncio

import httpx

from app.config import Settings
from app.database import ProductStore
from app.main import create_app

AUTH = {"Authorization": "Bearer mysecrettoken"}


async def _create(ac, i):
    return await ac.post("/api/products", json={"name": f"item {i}", "price": i + 1}, headers=AUTH)


async def _run_creates(app, n):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(*(_create(ac, i) for i in range(n)))


def test_concurrent_creates_get_unique_ids():
    store = ProductStore()
    app = create_app(store=store, settings=Settings())

    results = asyncio.run(_run_creates(app, 25))

    assert all(r.status_code == 201 for r in results)
    ids = [r.json()["id"] for r in results]
    assert len(set(ids)) == 25
    assert len(store) == 25


async def _mixed(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(
            ac.put("/api/products/1", json={"price": 1}, headers=AUTH),
            ac.put("/api/products/1", json={"name": "Notebook"}, headers=AUTH),
            ac.delete("/api/products/2", headers=AUTH),
            ac.get("/api/products"),
        )


def test_concurrent_updates_do_not_lose_fields():
    store = ProductStore.seeded()
    app = create_app(store=store, settings=Settings())

    results = asyncio.run(_mixed(app))

    assert [r.status_code for r in results] == [200, 200, 200, 200]
    laptop = asyncio.run(store.get_product("1"))
    assert laptop.price == 1
    assert laptop.name == "Notebook"
    assert [p.id for p in store.snapshot()] == ["1", "3"]
