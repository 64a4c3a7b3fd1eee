from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "Shopify SEO Audit"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    DEBUG: bool = True
    LOG_DIR: str = "logs"

    # ── Database ────────────────────────────────
    DATABASE_URL: str = "sqlite+aiosqlite:///./seo_audit.db"

    # ── Shopify Admin API ───────────────────────
    SHOPIFY_API_VERSION: str = "2024-10"
    SHOPIFY_REQUEST_TIMEOUT: float = 30.0

    # Page sizes for the content crawl
    SHOPIFY_PRODUCTS_LIMIT: int = 50
    SHOPIFY_PRODUCT_IMAGES_LIMIT: int = 10
    SHOPIFY_COLLECTIONS_LIMIT: int = 50
    SHOPIFY_PAGES_LIMIT: int = 50
    SHOPIFY_BLOGS_LIMIT: int = 10
    SHOPIFY_ARTICLES_PER_BLOG: int = 20

    # ── Scan history ────────────────────────────
    SCAN_HISTORY_LIMIT: int = 20

    class Config:
        env_file = str(Path(__file__).parent.parent.parent / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
