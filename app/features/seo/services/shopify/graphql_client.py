from typing import Any, Dict, Optional

import httpx

from app.platform.config import settings
from app.platform.exceptions import ShopifyAPIError, ShopifyAuthError
from app.platform.logger import get_logger

logger = get_logger(__name__)


class ShopifyAdminClient:
    """
    Minimal async client for the Shopify Admin GraphQL API.

    A transport error, a non-2xx response, a GraphQL `errors` payload or a
    response without `data` all raise ShopifyAPIError. A rejected access
    token (401/403) raises the ShopifyAuthError subclass.
    """

    def __init__(
        self,
        shop: str,
        access_token: str,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.shop = shop
        self.access_token = access_token
        self.api_version = api_version or settings.SHOPIFY_API_VERSION
        self.timeout = timeout or settings.SHOPIFY_REQUEST_TIMEOUT
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"https://{self.shop}/admin/api/{self.api_version}/graphql.json"

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "X-Shopify-Access-Token": self.access_token,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload = {"query": query, "variables": variables or {}}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(self.endpoint, json=payload, headers=self.headers)
            except httpx.RequestError as e:
                logger.error(f"[{self.shop}] GraphQL request failed: {e}")
                raise ShopifyAPIError(f"Request to Shopify failed: {e}", shop=self.shop) from e

        if response.status_code in (401, 403):
            logger.warning(f"[{self.shop}] Access token rejected with HTTP {response.status_code}")
            raise ShopifyAuthError(
                f"Shopify rejected the access token (HTTP {response.status_code})",
                shop=self.shop,
                status_code=response.status_code,
            )

        if response.status_code != 200:
            logger.error(f"[{self.shop}] GraphQL returned {response.status_code}: {response.text[:200]}")
            raise ShopifyAPIError(
                f"Shopify returned HTTP {response.status_code}",
                shop=self.shop,
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ShopifyAPIError("Shopify returned a non-JSON response", shop=self.shop) from e

        errors = body.get("errors")
        if errors:
            messages = "; ".join(
                error.get("message", str(error)) if isinstance(error, dict) else str(error)
                for error in (errors if isinstance(errors, list) else [errors])
            )
            logger.error(f"[{self.shop}] GraphQL errors: {messages}")
            raise ShopifyAPIError(f"GraphQL errors: {messages}", shop=self.shop)

        data = body.get("data")
        if data is None:
            raise ShopifyAPIError("GraphQL response contained no data", shop=self.shop)

        return data
