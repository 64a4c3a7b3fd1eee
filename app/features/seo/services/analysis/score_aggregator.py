"""
Score Aggregator

Fixed linear formulas from issue counts to 0-100 scores.
"""
import math
from typing import Iterable

from app.features.seo.schemas.analysis import IssueType, ScoreBreakdown, SEOIssue

CRITICAL_PENALTY = 15
WARNING_PENALTY = 5
MISSING_ALT_TEXT_PENALTY = 2

# No performance audit is wired in yet; every store gets the same value
PERFORMANCE_SCORE_PLACEHOLDER = 80


def clamp_score(value: float) -> int:
    return int(max(0, min(100, value)))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def count_by_type(issues: Iterable[SEOIssue], issue_type: IssueType) -> int:
    return sum(1 for issue in issues if issue.type == issue_type)


def content_score(critical_count: int, warning_count: int) -> int:
    # Penalty pool is global: accessibility-tagged warnings count here too
    return clamp_score(100 - CRITICAL_PENALTY * critical_count - WARNING_PENALTY * warning_count)


def accessibility_score(images_missing_alt_text: int) -> int:
    return clamp_score(100 - MISSING_ALT_TEXT_PENALTY * images_missing_alt_text)


def overall_score(content: int, accessibility: int, performance: int) -> int:
    return round_half_up((content + accessibility + performance) / 3)


def aggregate_scores(issues: Iterable[SEOIssue], images_missing_alt_text: int) -> ScoreBreakdown:
    issues = list(issues)
    critical_count = count_by_type(issues, IssueType.critical)
    warning_count = count_by_type(issues, IssueType.warning)

    content = content_score(critical_count, warning_count)
    accessibility = accessibility_score(images_missing_alt_text)
    performance = PERFORMANCE_SCORE_PLACEHOLDER

    return ScoreBreakdown(
        overall_score=overall_score(content, accessibility, performance),
        content_score=content,
        performance_score=performance,
        accessibility_score=accessibility,
    )
