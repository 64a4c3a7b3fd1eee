import json

import httpx
import pytest

from app.features.seo.schemas.resources import (
    ArticleResource,
    CollectionResource,
    ImageRef,
    PageResource,
    ProductResource,
)

LONG_TEXT = "x" * 600


@pytest.fixture
def clean_product():
    """A product that passes every product rule."""
    return ProductResource(
        id="gid://shopify/Product/1",
        handle="clean-tee",
        title="Clean Tee",
        meta_title="Clean Tee | Organic Cotton",
        meta_description="A soft organic cotton tee.",
        body="a" * 150,
        featured_image=ImageRef(url="https://cdn.shopify.com/tee.jpg", alt_text="White tee"),
        images=[ImageRef(url="https://cdn.shopify.com/tee.jpg", alt_text="White tee")],
    )


@pytest.fixture
def broken_product():
    """No meta title, no meta description, 10 character body, one image without alt text."""
    return ProductResource(
        id="gid://shopify/Product/2",
        handle="broken",
        title=None,
        body="short body",
        images=[ImageRef(url="https://cdn.shopify.com/broken.jpg", alt_text=None)],
    )


@pytest.fixture
def clean_collection():
    return CollectionResource(
        id="gid://shopify/Collection/1",
        handle="summer",
        title="Summer",
        meta_title="Summer Collection",
        meta_description="Everything for summer.",
        body="c" * 80,
    )


@pytest.fixture
def clean_page():
    return PageResource(id="gid://shopify/Page/1", handle="about", title="About", body="p" * 120)


@pytest.fixture
def clean_article():
    return ArticleResource(
        id="gid://shopify/Article/1",
        handle="care-guide",
        title="Care guide",
        meta_title="How to care for cotton",
        meta_description="Washing tips.",
        body=LONG_TEXT,
    )


def _connection(nodes):
    return {"edges": [{"node": node} for node in nodes]}


@pytest.fixture
def shopify_payloads():
    """GraphQL `data` objects keyed by the root field each query asks for."""
    return {
        "products": {
            "products": _connection([
                {
                    "id": "gid://shopify/Product/10",
                    "title": "Linen Shirt",
                    "handle": "linen-shirt",
                    "descriptionHtml": "<p>Short</p>",
                    "seo": {"title": None, "description": None},
                    "featuredImage": {"url": "https://cdn.shopify.com/linen.jpg", "altText": None},
                    "images": _connection([
                        {"url": "https://cdn.shopify.com/linen.jpg", "altText": None},
                        {"url": "https://cdn.shopify.com/linen-2.jpg", "altText": "Linen shirt back"},
                    ]),
                }
            ])
        },
        "collections": {
            "collections": _connection([
                {
                    "id": "gid://shopify/Collection/10",
                    "title": "Shirts",
                    "handle": "shirts",
                    "descriptionHtml": "",
                    "seo": {"title": "Shirts", "description": None},
                    "image": None,
                }
            ])
        },
        "pages": {
            "pages": _connection([
                {"id": "gid://shopify/Page/10", "title": "Contact", "handle": "contact", "body": "Email us"}
            ])
        },
        "blogs": {
            "blogs": _connection([
                {
                    "articles": _connection([
                        {
                            "id": "gid://shopify/Article/10",
                            "title": "Linen 101",
                            "handle": "linen-101",
                            "contentHtml": LONG_TEXT,
                            "seo": {"title": "Linen 101", "description": "All about linen"},
                            "image": None,
                        }
                    ])
                },
                {
                    "articles": _connection([
                        {
                            "id": "gid://shopify/Article/11",
                            "title": "News",
                            "handle": "news",
                            "contentHtml": "Short news",
                            "seo": None,
                            "image": None,
                        }
                    ])
                },
            ])
        },
    }


@pytest.fixture
def graphql_transport(shopify_payloads):
    """
    httpx.MockTransport answering each audit query with the matching payload.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        query = json.loads(request.content)["query"]
        for root_field, data in shopify_payloads.items():
            if f"{root_field}(" in query:
                return httpx.Response(200, json={"data": data})
        return httpx.Response(400, json={"errors": [{"message": "unexpected query"}]})

    return httpx.MockTransport(handler)
