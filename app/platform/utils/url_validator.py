import re
from typing import Tuple
from urllib.parse import urlparse

SHOP_DOMAIN_SUFFIX = ".myshopify.com"

_SHOP_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9-]*$")


def normalize_shop_domain(shop: str) -> str:
    """
    Reduce whatever the caller passed ("My-Store", "https://my-store.myshopify.com/")
    to the bare lowercase shop domain.
    """
    shop = shop.strip().lower()

    parsed = urlparse(shop if "://" in shop else f"https://{shop}")
    host = parsed.netloc or parsed.path
    host = host.rstrip("/")

    if "." not in host:
        host = f"{host}{SHOP_DOMAIN_SUFFIX}"

    return host


def validate_shop_domain(shop: str) -> Tuple[bool, str, str]:
    if not shop or not shop.strip():
        return False, "", "Shop domain cannot be empty"

    normalized = normalize_shop_domain(shop)

    if not normalized.endswith(SHOP_DOMAIN_SUFFIX):
        return False, normalized, f"Invalid shop domain: must end with {SHOP_DOMAIN_SUFFIX}"

    name = normalized[: -len(SHOP_DOMAIN_SUFFIX)]
    if not _SHOP_NAME_PATTERN.match(name):
        return False, normalized, f"Invalid shop name: {name or '(empty)'}"

    return True, normalized, ""
