"""
Issue Service

Formatting helpers for the issue snapshots stored on a scan.
"""
from typing import Any, Dict, List

from app.features.seo.schemas.analysis import IssueType


def group_issues_by_type(issues: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """
    Bucket issue snapshots by type, keeping their original order inside each bucket.

    Args:
        issues: Issue dicts as stored in SEOScan.issues

    Returns:
        Dictionary with one list per issue type: {critical, warning, info, success}
    """
    groups = {issue_type.value: [] for issue_type in IssueType}

    for issue in issues:
        issue_type = issue.get("type")
        if issue_type in groups:
            groups[issue_type].append(issue)

    return groups


def count_issues_by_type(issues: List[Dict[str, Any]]) -> Dict[str, int]:
    groups = group_issues_by_type(issues)
    return {issue_type: len(items) for issue_type, items in groups.items()}
