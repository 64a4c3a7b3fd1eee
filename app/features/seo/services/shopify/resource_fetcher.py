"""
Resource Fetcher

Pulls the store content the SEO audit needs from the Shopify Admin API
and maps GraphQL nodes onto resource schemas. Nodes are parsed
permissively: missing keys become None or empty lists.
"""
import asyncio
from typing import Any, Dict, List, Optional

from app.features.seo.schemas.resources import (
    ArticleResource,
    CollectionResource,
    ImageRef,
    PageResource,
    ProductResource,
    StoreResources,
)
from app.features.seo.services.shopify.graphql_client import ShopifyAdminClient
from app.features.seo.services.shopify.queries import (
    ARTICLES_QUERY,
    COLLECTIONS_QUERY,
    PAGES_QUERY,
    PRODUCTS_QUERY,
)
from app.platform.config import settings
from app.platform.logger import get_logger

logger = get_logger(__name__)


def _edge_nodes(connection: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    if not connection:
        return []
    return [edge.get("node") or {} for edge in connection.get("edges") or [] if edge]


def _parse_image(node: Optional[Dict[str, Any]]) -> Optional[ImageRef]:
    if not node:
        return None
    return ImageRef(url=node.get("url"), alt_text=node.get("altText"))


def _seo_fields(node: Dict[str, Any]) -> Dict[str, Optional[str]]:
    seo = node.get("seo") or {}
    return {"meta_title": seo.get("title"), "meta_description": seo.get("description")}


def parse_product(node: Dict[str, Any]) -> ProductResource:
    return ProductResource(
        id=node.get("id"),
        handle=node.get("handle"),
        title=node.get("title"),
        body=node.get("descriptionHtml"),
        featured_image=_parse_image(node.get("featuredImage")),
        images=[image for image in map(_parse_image, _edge_nodes(node.get("images"))) if image],
        **_seo_fields(node),
    )


def parse_collection(node: Dict[str, Any]) -> CollectionResource:
    return CollectionResource(
        id=node.get("id"),
        handle=node.get("handle"),
        title=node.get("title"),
        body=node.get("descriptionHtml"),
        image=_parse_image(node.get("image")),
        **_seo_fields(node),
    )


def parse_page(node: Dict[str, Any]) -> PageResource:
    return PageResource(
        id=node.get("id"),
        handle=node.get("handle"),
        title=node.get("title"),
        body=node.get("body"),
    )


def parse_article(node: Dict[str, Any]) -> ArticleResource:
    return ArticleResource(
        id=node.get("id"),
        handle=node.get("handle"),
        title=node.get("title"),
        body=node.get("contentHtml"),
        image=_parse_image(node.get("image")),
        **_seo_fields(node),
    )


async def fetch_products(client: ShopifyAdminClient) -> List[ProductResource]:
    data = await client.execute(
        PRODUCTS_QUERY,
        {"first": settings.SHOPIFY_PRODUCTS_LIMIT, "imagesFirst": settings.SHOPIFY_PRODUCT_IMAGES_LIMIT},
    )
    return [parse_product(node) for node in _edge_nodes(data.get("products"))]


async def fetch_collections(client: ShopifyAdminClient) -> List[CollectionResource]:
    data = await client.execute(COLLECTIONS_QUERY, {"first": settings.SHOPIFY_COLLECTIONS_LIMIT})
    return [parse_collection(node) for node in _edge_nodes(data.get("collections"))]


async def fetch_pages(client: ShopifyAdminClient) -> List[PageResource]:
    data = await client.execute(PAGES_QUERY, {"first": settings.SHOPIFY_PAGES_LIMIT})
    return [parse_page(node) for node in _edge_nodes(data.get("pages"))]


async def fetch_articles(client: ShopifyAdminClient) -> List[ArticleResource]:
    """Articles of every blog, flattened in blog order."""
    data = await client.execute(
        ARTICLES_QUERY,
        {"blogsFirst": settings.SHOPIFY_BLOGS_LIMIT, "articlesFirst": settings.SHOPIFY_ARTICLES_PER_BLOG},
    )
    articles = []
    for blog in _edge_nodes(data.get("blogs")):
        articles.extend(parse_article(node) for node in _edge_nodes(blog.get("articles")))
    return articles


async def fetch_store_resources(client: ShopifyAdminClient) -> StoreResources:
    """
    Fetch all four resource lists concurrently.

    If any fetch fails the error propagates and no StoreResources is
    returned, so a scan never runs on partial content.
    """
    products, collections, pages, articles = await asyncio.gather(
        fetch_products(client),
        fetch_collections(client),
        fetch_pages(client),
        fetch_articles(client),
    )

    logger.info(
        f"[{client.shop}] Fetched {len(products)} products, {len(collections)} collections, "
        f"{len(pages)} pages, {len(articles)} articles"
    )

    return StoreResources(
        products=products,
        collections=collections,
        pages=pages,
        articles=articles,
    )
