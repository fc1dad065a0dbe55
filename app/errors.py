"""
Errors raised by the product store.

Each carries the HTTP status it maps to, so the API layer can render them
uniformly as ``{"message": ...}``.
"""


class StoreError(Exception):
    """Base class for product store failures."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProductValidationError(StoreError):
    status_code = 400

    def __init__(self, message: str = "Name and price are required"):
        super().__init__(message)


class ProductNotFound(StoreError):
    status_code = 404

    def __init__(self, product_id: str):
        super().__init__("Product not found")
        self.product_id = product_id
