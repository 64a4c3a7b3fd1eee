import pytest

from app.features.seo.schemas.resources import (
    CollectionResource,
    ImageRef,
    PageResource,
    ProductResource,
    StoreResources,
)
from app.features.seo.services.analysis.evaluator import evaluate_rules
from app.features.seo.services.analysis.seo_analyzer import analyze_store_resources


def _ids(result):
    return [issue.id for issue in result.issues]


class TestEvaluateRules:
    def test_empty_store_has_zero_counts(self):
        counts = evaluate_rules(StoreResources())

        assert all(value == 0 for value in counts.by_rule.values())
        assert counts.resources_checked("product") == 0

    def test_rules_are_not_short_circuited(self, broken_product):
        counts = evaluate_rules(StoreResources(products=[broken_product]))

        assert counts["products-meta-title"] == 1
        assert counts["products-meta-description"] == 1
        assert counts["products-short-description"] == 1
        assert counts["products-alt-text"] == 1

    def test_resources_only_checked_against_their_own_type(self):
        # A page with no body must not trip any product/collection/article rule
        counts = evaluate_rules(StoreResources(pages=[PageResource()]))

        assert counts["pages-content"] == 1
        assert sum(counts.by_rule.values()) == 1

    def test_counts_are_read_only(self, broken_product):
        counts = evaluate_rules(StoreResources(products=[broken_product]))

        with pytest.raises(TypeError):
            counts.by_rule["products-meta-title"] = 0
        assert counts["products-meta-title"] == 1


class TestAnalyzeStoreResources:
    def test_empty_input(self):
        result = analyze_store_resources(StoreResources())

        assert result.crawled_pages == 0
        assert result.issues == []
        assert result.critical_issues == 0
        assert result.improvements == 0
        assert result.good_results == 0
        assert result.content_score == 100
        assert result.accessibility_score == 100
        assert result.performance_score == 80
        assert result.overall_score == 93

    def test_single_clean_product(self, clean_product):
        result = analyze_store_resources(StoreResources(products=[clean_product]))

        assert result.crawled_pages == 1
        assert result.critical_issues == 0
        assert result.improvements == 0
        assert result.good_results == 2
        assert _ids(result) == ["products-meta-title-good", "products-alt-text-good"]
        assert result.content_score == 100
        assert result.accessibility_score == 100
        assert result.overall_score == 93

    def test_single_product_missing_everything(self, broken_product):
        result = analyze_store_resources(StoreResources(products=[broken_product]))

        assert _ids(result) == [
            "products-meta-title",
            "products-meta-description",
            "products-alt-text",
            "products-short-description",
        ]
        assert [issue.type for issue in result.issues] == ["critical", "critical", "warning", "warning"]
        assert all(issue.affected_pages == 1 for issue in result.issues)
        assert result.critical_issues == 2
        assert result.improvements == 2
        assert result.good_results == 0
        assert result.content_score == 60
        assert result.accessibility_score == 98
        assert result.overall_score == 79

    def test_success_issues_follow_problems(self, clean_product, clean_page):
        product = clean_product.model_copy(update={"meta_description": None})
        result = analyze_store_resources(
            StoreResources(products=[product], pages=[PageResource(body="tiny")], collections=[])
        )

        assert _ids(result) == [
            "products-meta-description",
            "pages-content",
            "products-meta-title-good",
            "products-alt-text-good",
        ]

    def test_no_good_results_for_other_resource_types(self, clean_collection, clean_page, clean_article):
        result = analyze_store_resources(
            StoreResources(collections=[clean_collection], pages=[clean_page], articles=[clean_article])
        )

        assert result.issues == []
        assert result.good_results == 0
        assert result.crawled_pages == 3

    def test_alt_text_affected_pages_counts_images(self):
        product = ProductResource(
            title="Tee",
            meta_description="desc",
            featured_image=ImageRef(url="a.jpg"),
            images=[ImageRef(url="a.jpg"), ImageRef(url="b.jpg"), ImageRef(url="c.jpg", alt_text="ok")],
        )
        result = analyze_store_resources(StoreResources(products=[product]))

        alt_issue = next(issue for issue in result.issues if issue.id == "products-alt-text")
        assert alt_issue.affected_pages == 3
        assert result.accessibility_score == 94
        # the accessibility warning also costs content points
        assert result.content_score == 95

    def test_many_violations_clamp_scores_at_zero(self):
        products = [ProductResource(images=[ImageRef(url=f"{i}.jpg")] * 10) for i in range(10)]
        collections = [CollectionResource() for _ in range(3)]
        result = analyze_store_resources(StoreResources(products=products, collections=collections))

        # 100 images without alt text → 100 - 200 clamps to 0
        assert result.accessibility_score == 0
        # 3 critical + 3 warning issues → 100 - 45 - 15
        assert result.content_score == 40
        assert result.overall_score == 40

    def test_deterministic_and_idempotent(self, broken_product, clean_collection, clean_page):
        resources = StoreResources(
            products=[broken_product], collections=[clean_collection], pages=[clean_page]
        )

        first = analyze_store_resources(resources)
        second = analyze_store_resources(resources)

        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_issue_snapshot_uses_camel_case(self, broken_product, clean_product):
        result = analyze_store_resources(StoreResources(products=[broken_product]))
        snapshot = result.issues[0].to_snapshot()

        assert snapshot == {
            "id": "products-meta-title",
            "type": "critical",
            "category": "content",
            "title": "Products missing meta title",
            "description": "Meta titles help search engines understand your product pages and improve click-through rates.",
            "affectedPages": 1,
            "resourceType": "product",
            "fixable": True,
        }

        good = analyze_store_resources(StoreResources(products=[clean_product])).issues[0].to_snapshot()
        assert "affectedPages" not in good
        assert good["fixable"] is False
