# sdk/products.py
import requests
import httpx
from typing import Any, Dict, List, Optional


class ProductAPIError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _message_of(r) -> str:
    try:
        body = r.json()
    except ValueError:
        return r.text
    if isinstance(body, dict) and "message" in body:
        return str(body["message"])
    return str(body)


class ProductClient:
    """Thin client for the product API.

    ``session`` defaults to a ``requests.Session``; anything exposing the same
    ``get``/``post``/``put``/``delete`` calls and a ``headers`` mapping works.
    """

    def __init__(self, base_url: str = "http://localhost:3000", token: Optional[str] = None,
                 timeout: int = 10, session: Any = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.token = token
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _check(self, r) -> Any:
        if r.status_code >= 400:
            raise ProductAPIError(r.status_code, _message_of(r))
        return r.json()

    def welcome(self) -> str:
        r = self.session.get(self._url("/"), timeout=self.timeout)
        if r.status_code >= 400:
            raise ProductAPIError(r.status_code, _message_of(r))
        return r.text

    # Reads
    def list_products(self, category: Optional[str] = None, q: Optional[str] = None,
                      page: Optional[int] = None, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        params = {}
        if category:
            params["category"] = category
        if q:
            params["q"] = q
        if page is not None:
            params["page"] = str(page)
        if limit is not None:
            params["limit"] = str(limit)
        r = self.session.get(self._url("/api/products"), params=params, timeout=self.timeout)
        return self._check(r)

    def get_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        return self._check(r)

    # Writes
    def create_product(self, name: str, price: Any, description: Optional[str] = None,
                       category: Optional[str] = None, in_stock: Optional[bool] = None) -> Dict[str, Any]:
        payload = _create_payload(name, price, description, category, in_stock)
        r = self.session.post(self._url("/api/products"), json=payload, timeout=self.timeout)
        return self._check(r)

    def update_product(self, product_id: str, **fields: Any) -> Dict[str, Any]:
        if "in_stock" in fields:
            fields["inStock"] = fields.pop("in_stock")
        r = self.session.put(self._url(f"/api/products/{product_id}"), json=fields, timeout=self.timeout)
        return self._check(r)

    def delete_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        return self._check(r)

    # Async create (used by the concurrent demo)
    async def create_product_async(self, name: str, price: Any, description: Optional[str] = None,
                                   category: Optional[str] = None, in_stock: Optional[bool] = None,
                                   client: Optional[httpx.AsyncClient] = None) -> Dict[str, Any]:
        payload = _create_payload(name, price, description, category, in_stock)
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        if client is not None:
            r = await client.post(self._url("/api/products"), json=payload, headers=headers)
            return self._check(r)
        async with httpx.AsyncClient(timeout=self.timeout) as ac:
            r = await ac.post(self._url("/api/products"), json=payload, headers=headers)
            return self._check(r)


def _create_payload(name, price, description, category, in_stock) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"name": name, "price": price}
    if description is not None:
        payload["description"] = description
    if category is not None:
        payload["category"] = category
    if in_stock is not None:
        payload["inStock"] = in_stock
    return payload


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "y")


if __name__ == "__main__":
    import argparse
    from rich import print

    parser = argparse.ArgumentParser(description="Product API client")
    parser.add_argument("--base-url", default="http://localhost:3000", help="API base URL")
    parser.add_argument("--token", default=None, help="Bearer token for write operations")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list", help="List products")
    lp.add_argument("--category", help="Exact category filter")
    lp.add_argument("--q", help="Case-insensitive name search")
    lp.add_argument("--page", type=int, help="Page number (1-based)")
    lp.add_argument("--limit", type=int, help="Page size")

    gp = subparsers.add_parser("get", help="Get a product by its ID")
    gp.add_argument("--id", required=True, help="Product ID")

    cp = subparsers.add_parser("create", help="Create a product")
    cp.add_argument("--name", required=True)
    cp.add_argument("--price", type=float, required=True)
    cp.add_argument("--description")
    cp.add_argument("--category")
    cp.add_argument("--in-stock", type=_parse_bool)

    up = subparsers.add_parser("update", help="Update fields of a product")
    up.add_argument("--id", required=True)
    up.add_argument("--name")
    up.add_argument("--price", type=float)
    up.add_argument("--description")
    up.add_argument("--category")
    up.add_argument("--in-stock", type=_parse_bool)

    dp = subparsers.add_parser("delete", help="Delete a product")
    dp.add_argument("--id", required=True)

    args = parser.parse_args()
    c = ProductClient(base_url=args.base_url, token=args.token)

    try:
        if args.command == "list":
            print(c.list_products(args.category, args.q, args.page, args.limit))
        elif args.command == "get":
            print(c.get_product(args.id))
        elif args.command == "create":
            print(c.create_product(args.name, args.price, args.description, args.category, args.in_stock))
        elif args.command == "update":
            fields = {k: v for k, v in {
                "name": args.name, "price": args.price, "description": args.description,
                "category": args.category, "inStock": args.in_stock,
            }.items() if v is not None}
            print(c.update_product(args.id, **fields))
        elif args.command == "delete":
            print(c.delete_product(args.id))
    except ProductAPIError as e:
        print(f"[red]{e}[/red]")
        raise SystemExit(1)
