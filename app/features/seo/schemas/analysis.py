"""
Analysis Schemas

The issue records and the aggregate result produced by one audit run.
Serialized with camelCase aliases, which is the shape stored in the scan
snapshot and served to the dashboard.
"""
import enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IssueType(str, enum.Enum):
    """Severity / valence of an issue"""
    critical = "critical"
    warning = "warning"
    info = "info"
    success = "success"


class IssueCategory(str, enum.Enum):
    content = "content"
    performance = "performance"
    accessibility = "accessibility"
    technical = "technical"


class SEOIssue(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    id: str
    type: IssueType
    category: IssueCategory
    title: str
    description: str
    affected_pages: Optional[int] = Field(default=None, alias="affectedPages")
    resource_type: Optional[str] = Field(default=None, alias="resourceType")
    fixable: bool = False

    def to_snapshot(self) -> dict:
        """JSON-ready dict; `affectedPages`/`resourceType` are omitted when unset."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int
    content_score: int
    performance_score: int
    accessibility_score: int


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    overall_score: int = Field(alias="overallScore")
    content_score: int = Field(alias="contentScore")
    performance_score: int = Field(alias="performanceScore")
    accessibility_score: int = Field(alias="accessibilityScore")
    critical_issues: int = Field(alias="criticalIssues")
    improvements: int
    good_results: int = Field(alias="goodResults")
    issues: List[SEOIssue] = Field(default_factory=list)
    crawled_pages: int = Field(alias="crawledPages")


class GroupedIssuesResponse(BaseModel):
    """Issues of the latest scan bucketed by type, the way the dashboard tabs show them."""
    scan_id: str
    counts: dict
    critical: List[dict] = Field(default_factory=list)
    warning: List[dict] = Field(default_factory=list)
    info: List[dict] = Field(default_factory=list)
    success: List[dict] = Field(default_factory=list)
