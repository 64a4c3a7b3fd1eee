"""
SEO Analyzer

Entry point of the audit engine: resources → violation counts → issues →
scores. Pure and synchronous; callers fetch the resources beforehand and
persist the result afterwards.
"""
from app.features.seo.schemas.analysis import AnalysisResult, IssueType
from app.features.seo.schemas.resources import StoreResources
from app.features.seo.services.analysis.evaluator import evaluate_rules
from app.features.seo.services.analysis.issue_synthesizer import synthesize_issues
from app.features.seo.services.analysis.score_aggregator import aggregate_scores, count_by_type


def analyze_store_resources(resources: StoreResources) -> AnalysisResult:
    """
    Audit one store's content.

    Args:
        resources: Products, collections, pages and articles as fetched from Shopify.
            Must be complete; never call this with lists from a failed fetch.

    Returns:
        AnalysisResult with scores, tallies and the ordered issue list
    """
    counts = evaluate_rules(resources)
    issues = synthesize_issues(counts)
    scores = aggregate_scores(issues, images_missing_alt_text=counts["products-alt-text"])

    return AnalysisResult(
        overall_score=scores.overall_score,
        content_score=scores.content_score,
        performance_score=scores.performance_score,
        accessibility_score=scores.accessibility_score,
        critical_issues=count_by_type(issues, IssueType.critical),
        improvements=count_by_type(issues, IssueType.warning),
        good_results=count_by_type(issues, IssueType.success),
        issues=issues,
        crawled_pages=resources.total,
    )
