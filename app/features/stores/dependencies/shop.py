from fastapi import HTTPException, Path, status

from app.platform.utils.url_validator import validate_shop_domain


async def get_valid_shop(
    shop: str = Path(..., description="Shop domain, e.g. my-store.myshopify.com"),
) -> str:
    """
    Dependency that validates and normalizes the `{shop}` path parameter.

    Raises 400 for anything that isn't a *.myshopify.com domain.
    """
    is_valid, normalized, error_message = validate_shop_domain(shop)
    if not is_valid:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error_message,
        )
    return normalized
