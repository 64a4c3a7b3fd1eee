import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.platform.response import api_response


class ShopifyAPIError(Exception):
    """
    Raised when the Shopify Admin API cannot deliver store content.

    Any instance aborts the scan that triggered it: no partial
    resource lists are ever scored or persisted.
    """

    def __init__(self, message: str, shop: str = None, status_code: int = None):
        super().__init__(message)
        self.message = message
        self.shop = shop
        self.status_code = status_code


class ShopifyAuthError(ShopifyAPIError):
    """Shopify rejected the store's access token (HTTP 401 or 403)."""


def add_exception_handlers(app):
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return api_response(message=str(exc.detail) or "Error", status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return api_response(
            message="Validation failed",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            data={"errors": exc.errors()},
        )

    @app.exception_handler(ShopifyAuthError)
    async def shopify_auth_exception_handler(request: Request, exc: ShopifyAuthError):
        logging.warning(f"Shopify rejected the access token for {exc.shop}: {exc.message}")
        return api_response(
            message="Shopify rejected the access token, reconnect the store and try again",
            status_code=status.HTTP_401_UNAUTHORIZED,
            data={"shop": exc.shop, "upstream_status": exc.status_code},
        )

    @app.exception_handler(ShopifyAPIError)
    async def shopify_exception_handler(request: Request, exc: ShopifyAPIError):
        logging.warning(f"Shopify API error for {exc.shop}: {exc.message}")
        return api_response(
            message=f"Failed to fetch store content from Shopify: {exc.message}",
            status_code=status.HTTP_502_BAD_GATEWAY,
            data={"shop": exc.shop, "upstream_status": exc.status_code},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logging.exception(f"Unhandled exception: {exc}")
        return api_response(
            message="Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
