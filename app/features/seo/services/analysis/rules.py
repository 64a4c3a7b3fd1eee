"""
SEO rule table.

Each rule is one threshold check against one resource type, plus the
fixed issue template it produces when any resource violates it. The order
of RULES is the order issues are reported in.
"""
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from app.features.seo.schemas.analysis import IssueCategory, IssueType
from app.features.seo.schemas.resources import (
    ArticleResource,
    CollectionResource,
    ContentResource,
    PageResource,
    ProductResource,
)

PRODUCT_MIN_DESCRIPTION_LENGTH = 100
COLLECTION_MIN_DESCRIPTION_LENGTH = 50
PAGE_MIN_CONTENT_LENGTH = 100
ARTICLE_MIN_CONTENT_LENGTH = 500


@dataclass(frozen=True)
class SEORule:
    id: str
    resource_type: str
    violations: Callable[[ContentResource], int]
    type: IssueType
    category: IssueCategory
    title: str
    description: str
    fixable: bool = True


@dataclass(frozen=True)
class SuccessRule:
    """A positive result reported when `rule_id` found nothing on a non-empty resource list."""
    id: str
    rule_id: str
    category: IssueCategory
    title: str
    description: str


def _is_short(text: Optional[str], min_length: int) -> bool:
    """Present but shorter than min_length."""
    return bool(text) and len(text) < min_length


def _is_missing_or_short(text: Optional[str], min_length: int) -> bool:
    return not text or len(text) < min_length


# ── Products ────────────────────────────────

def product_missing_meta_title(product: ProductResource) -> int:
    # Shopify falls back to the product title when no SEO title is set
    return int(not product.meta_title and not product.title)


def product_missing_meta_description(product: ProductResource) -> int:
    return int(not product.meta_description)


def product_images_missing_alt_text(product: ProductResource) -> int:
    """Counts images, not products. The featured image counts on its own."""
    missing = sum(1 for image in product.images if not image.has_alt_text)
    if product.featured_image and not product.featured_image.has_alt_text:
        missing += 1
    return missing


def product_short_description(product: ProductResource) -> int:
    return int(_is_short(product.body, PRODUCT_MIN_DESCRIPTION_LENGTH))


# ── Collections ─────────────────────────────

def collection_missing_meta_title(collection: CollectionResource) -> int:
    return int(not collection.meta_title)


def collection_missing_meta_description(collection: CollectionResource) -> int:
    return int(not collection.meta_description)


def collection_missing_description(collection: CollectionResource) -> int:
    return int(_is_missing_or_short(collection.body, COLLECTION_MIN_DESCRIPTION_LENGTH))


# ── Pages ───────────────────────────────────

def page_missing_content(page: PageResource) -> int:
    return int(_is_missing_or_short(page.body, PAGE_MIN_CONTENT_LENGTH))


# ── Articles ────────────────────────────────

def article_missing_meta_title(article: ArticleResource) -> int:
    return int(not article.meta_title)


def article_missing_meta_description(article: ArticleResource) -> int:
    return int(not article.meta_description)


def article_short_content(article: ArticleResource) -> int:
    return int(_is_short(article.body, ARTICLE_MIN_CONTENT_LENGTH))


RULES: Tuple[SEORule, ...] = (
    SEORule(
        id="products-meta-title",
        resource_type="product",
        violations=product_missing_meta_title,
        type=IssueType.critical,
        category=IssueCategory.content,
        title="Products missing meta title",
        description="Meta titles help search engines understand your product pages and improve click-through rates.",
    ),
    SEORule(
        id="products-meta-description",
        resource_type="product",
        violations=product_missing_meta_description,
        type=IssueType.critical,
        category=IssueCategory.content,
        title="Products missing meta description",
        description="Meta descriptions appear in search results and encourage users to click on your products.",
    ),
    SEORule(
        id="products-alt-text",
        resource_type="product",
        violations=product_images_missing_alt_text,
        type=IssueType.warning,
        category=IssueCategory.accessibility,
        title="Product images missing alt text",
        description="Alt text improves accessibility and helps search engines understand your images.",
    ),
    SEORule(
        id="products-short-description",
        resource_type="product",
        violations=product_short_description,
        type=IssueType.warning,
        category=IssueCategory.content,
        title="Products with short descriptions",
        description="Longer, detailed product descriptions can improve SEO and conversions.",
    ),
    SEORule(
        id="collections-meta-title",
        resource_type="collection",
        violations=collection_missing_meta_title,
        type=IssueType.critical,
        category=IssueCategory.content,
        title="Collections missing meta title",
        description="Collection meta titles help category pages rank in search results.",
    ),
    SEORule(
        id="collections-meta-description",
        resource_type="collection",
        violations=collection_missing_meta_description,
        type=IssueType.warning,
        category=IssueCategory.content,
        title="Collections missing meta description",
        description="Meta descriptions for collections improve their visibility in search results.",
    ),
    SEORule(
        id="collections-description",
        resource_type="collection",
        violations=collection_missing_description,
        type=IssueType.warning,
        category=IssueCategory.content,
        title="Collections missing description",
        description="Collection descriptions provide context for search engines and customers.",
    ),
    SEORule(
        id="pages-content",
        resource_type="page",
        violations=page_missing_content,
        type=IssueType.warning,
        category=IssueCategory.content,
        title="Pages with insufficient content",
        description="Pages need substantial content to rank well in search results.",
    ),
    SEORule(
        id="articles-meta-title",
        resource_type="article",
        violations=article_missing_meta_title,
        type=IssueType.warning,
        category=IssueCategory.content,
        title="Blog posts missing meta title",
        description="Blog post meta titles help your content rank for target keywords.",
    ),
    SEORule(
        id="articles-meta-description",
        resource_type="article",
        violations=article_missing_meta_description,
        type=IssueType.warning,
        category=IssueCategory.content,
        title="Blog posts missing meta description",
        description="Meta descriptions encourage clicks from search results.",
    ),
    SEORule(
        id="articles-short-content",
        resource_type="article",
        violations=article_short_content,
        type=IssueType.warning,
        category=IssueCategory.content,
        title="Blog posts with short content",
        description="Longer, comprehensive blog posts tend to rank better in search results.",
    ),
)

# Only products have positive results; collections, pages and articles never report one.
SUCCESS_RULES: Tuple[SuccessRule, ...] = (
    SuccessRule(
        id="products-meta-title-good",
        rule_id="products-meta-title",
        category=IssueCategory.content,
        title="All products have meta titles",
        description="Great! Your products are optimized with meta titles.",
    ),
    SuccessRule(
        id="products-alt-text-good",
        rule_id="products-alt-text",
        category=IssueCategory.accessibility,
        title="All product images have alt text",
        description="Excellent! Your product images are accessible and SEO-friendly.",
    ),
)

RESOURCE_TYPES: Tuple[str, ...] = ("product", "collection", "page", "article")


def rules_for(resource_type: str) -> Tuple[SEORule, ...]:
    return tuple(rule for rule in RULES if rule.resource_type == resource_type)


def get_rule(rule_id: str) -> SEORule:
    for rule in RULES:
        if rule.id == rule_id:
            return rule
    raise KeyError(f"Unknown SEO rule: {rule_id}")
