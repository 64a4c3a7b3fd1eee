"""
Issue Synthesizer

Turns violation totals into issue records. Problems come first, in rule
table order; positive results are appended after them. Nothing is sorted
by severity or by affected count.
"""
from typing import List

from app.features.seo.schemas.analysis import IssueType, SEOIssue
from app.features.seo.services.analysis.evaluator import ViolationCounts
from app.features.seo.services.analysis.rules import RULES, SUCCESS_RULES, get_rule


def build_problem_issues(counts: ViolationCounts) -> List[SEOIssue]:
    issues = []
    for rule in RULES:
        affected = counts[rule.id]
        if affected <= 0:
            continue
        issues.append(
            SEOIssue(
                id=rule.id,
                type=rule.type,
                category=rule.category,
                title=rule.title,
                description=rule.description,
                affected_pages=affected,
                resource_type=rule.resource_type,
                fixable=rule.fixable,
            )
        )
    return issues


def build_success_issues(counts: ViolationCounts) -> List[SEOIssue]:
    issues = []
    for success in SUCCESS_RULES:
        resource_type = get_rule(success.rule_id).resource_type
        if counts[success.rule_id] == 0 and counts.resources_checked(resource_type) > 0:
            issues.append(
                SEOIssue(
                    id=success.id,
                    type=IssueType.success,
                    category=success.category,
                    title=success.title,
                    description=success.description,
                    fixable=False,
                )
            )
    return issues


def synthesize_issues(counts: ViolationCounts) -> List[SEOIssue]:
    return build_problem_issues(counts) + build_success_issues(counts)
