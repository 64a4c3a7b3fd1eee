from fastapi import Depends, Header, HTTPException, status

from app.features.seo.services.shopify.graphql_client import ShopifyAdminClient
from app.features.stores.dependencies.shop import get_valid_shop


async def get_shopify_client(
    shop: str = Depends(get_valid_shop),
    x_shopify_access_token: str = Header(None, alias="X-Shopify-Access-Token"),
) -> ShopifyAdminClient:
    """
    Build an Admin API client for the shop in the path.

    The access token comes from the caller (the embedded app's session
    layer); this service does not store tokens.
    """
    if not x_shopify_access_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-Shopify-Access-Token header is required",
        )
    return ShopifyAdminClient(shop=shop, access_token=x_shopify_access_token)
