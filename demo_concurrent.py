import asyncio
import httpx
from sdk.products import ProductClient, ProductAPIError

async def create_one(client, ac, i):
    try:
        p = await client.create_product_async(f"Widget {i}", 10 + i, category="widgets", client=ac)
        print(f"✅ created {p['name']} ({p['id']})")
        return p
    except ProductAPIError as e:
        print(f"❌ Widget {i} failed: {e}")
        return None

async def main():
    c = ProductClient(base_url="http://127.0.0.1:3000", token="mysecrettoken")

    print("\n⚡ Creating products concurrently...")
    async with httpx.AsyncClient(timeout=c.timeout) as ac:
        created = await asyncio.gather(*(create_one(c, ac, i) for i in range(10)))

    ids = [p["id"] for p in created if p]
    print(f"\n🆔 {len(ids)} created, {len(set(ids))} distinct ids")

    widgets = c.list_products(category="widgets", limit=100)
    print(f"📦 {len(widgets)} widgets in the catalogue")

if __name__ == "__main__":
    asyncio.run(main())
