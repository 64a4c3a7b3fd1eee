"""
Resource Schemas

Typed views of the store content that the SEO audit runs over. Field
values are kept exactly as Shopify returns them: no HTML stripping and no
trimming. Every field is optional so that a malformed node is scored as
present-but-empty instead of failing the run.
"""
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field


class ImageRef(BaseModel):
    """An image attached to a resource."""
    url: Optional[str] = None
    alt_text: Optional[str] = None

    @property
    def has_alt_text(self) -> bool:
        return bool(self.alt_text)


class ContentResourceBase(BaseModel):
    id: Optional[str] = None
    handle: Optional[str] = None
    title: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    body: Optional[str] = None


class ProductResource(ContentResourceBase):
    resource_type: Literal["product"] = "product"
    featured_image: Optional[ImageRef] = None
    images: List[ImageRef] = Field(default_factory=list)


class CollectionResource(ContentResourceBase):
    resource_type: Literal["collection"] = "collection"
    image: Optional[ImageRef] = None


class PageResource(ContentResourceBase):
    resource_type: Literal["page"] = "page"


class ArticleResource(ContentResourceBase):
    resource_type: Literal["article"] = "article"
    image: Optional[ImageRef] = None


ContentResource = Union[ProductResource, CollectionResource, PageResource, ArticleResource]


class StoreResources(BaseModel):
    """The four content lists of one store, in the order Shopify returned them."""
    products: List[ProductResource] = Field(default_factory=list)
    collections: List[CollectionResource] = Field(default_factory=list)
    pages: List[PageResource] = Field(default_factory=list)
    articles: List[ArticleResource] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.products) + len(self.collections) + len(self.pages) + len(self.articles)

    def for_type(self, resource_type: str) -> List[ContentResource]:
        return {
            "product": self.products,
            "collection": self.collections,
            "page": self.pages,
            "article": self.articles,
        }[resource_type]
