# app/main.py
import logging
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, configure_logging, get_settings
from .database import ProductStore
from .errors import StoreError
from .models import Product, ProductCreate, ProductUpdate
from .pipeline import Authorizer, RequestPipeline, log_request
from .sdk import (
    create_product_logic, delete_product_logic, get_product_logic,
    list_products_logic, update_product_logic, welcome_logic,
)

logger = logging.getLogger(__name__)


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


# ---------------------------
# Error handlers
# ---------------------------
async def _store_error_handler(request: Request, exc: StoreError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _invalid_body_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": "Invalid request body"})


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# ---------------------------
# App factory
# ---------------------------
def create_app(store: Optional[ProductStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="product-api (in-memory demo)")
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore.seeded()

    # Order matters: logger, then authorizer, then the route.
    pipeline = RequestPipeline([log_request, Authorizer(settings.expected_authorization)])
    app.middleware("http")(pipeline)

    app.add_exception_handler(StoreError, _store_error_handler)
    app.add_exception_handler(RequestValidationError, _invalid_body_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    # ---------------------------
    # Routes
    # ---------------------------
    @app.get("/", response_class=PlainTextResponse)
    async def welcome():
        return await welcome_logic()

    @app.get("/api/products", response_model=List[Product])
    async def list_products(
        category: Optional[str] = None,
        q: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        store: ProductStore = Depends(get_store),
    ):
        return await list_products_logic(store, category=category, q=q, page=page, limit=limit)

    @app.get("/api/products/{product_id}", response_model=Product)
    async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
        return await get_product_logic(store, product_id)

    @app.post("/api/products", status_code=201, response_model=Product)
    async def create_product(
        payload: Optional[ProductCreate] = None,
        store: ProductStore = Depends(get_store),
    ):
        return await create_product_logic(store, payload)

    @app.put("/api/products/{product_id}", response_model=Product)
    async def update_product(
        product_id: str,
        payload: Optional[ProductUpdate] = None,
        store: ProductStore = Depends(get_store),
    ):
        return await update_product_logic(store, product_id, payload)

    @app.delete("/api/products/{product_id}")
    async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
        return await delete_product_logic(store, product_id)

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    server_app = create_app(settings=settings)
    logger.info("Server is running at http://localhost:%d", settings.port)
    uvicorn.run(server_app, host=settings.host, port=settings.port,
                log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
