"""
Scan Schemas

Response models for the scan API endpoints.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from app.features.stores.services.store_service import score_label


class ScanResponse(BaseModel):
    """One persisted audit run."""
    id: str
    store_id: str
    overall_score: int
    content_score: int
    performance_score: int
    accessibility_score: int
    score_label: Optional[str] = None
    critical_issues: int
    improvements: int
    good_results: int
    crawled_pages: int
    issues: List[Dict[str, Any]] = []
    scanned_at: datetime

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": "019ac789-0abc-def0-1234-567890abcdef",
                "store_id": "019ac5fd-93bf-7368-9f64-7726995a6a04",
                "overall_score": 79,
                "content_score": 60,
                "performance_score": 80,
                "accessibility_score": 98,
                "score_label": "Medium",
                "critical_issues": 2,
                "improvements": 2,
                "good_results": 0,
                "crawled_pages": 1,
                "issues": [
                    {
                        "id": "products-meta-title",
                        "type": "critical",
                        "category": "content",
                        "title": "Products missing meta title",
                        "description": "Meta titles help search engines understand your product pages and improve click-through rates.",
                        "affectedPages": 1,
                        "resourceType": "product",
                        "fixable": True,
                    }
                ],
                "scanned_at": "2025-11-28T10:30:00Z",
            }
        }

    @classmethod
    def from_scan(cls, scan) -> "ScanResponse":
        response = cls.model_validate(scan)
        return response.model_copy(update={"score_label": score_label(scan.overall_score)})


class ScanHistoryItem(BaseModel):
    """Condensed scan row for the history list."""
    id: str
    overall_score: int
    score_label: Optional[str] = None
    critical_issues: int
    improvements: int
    good_results: int
    crawled_pages: int
    scanned_at: datetime

    class Config:
        from_attributes = True

    @classmethod
    def from_scan(cls, scan) -> "ScanHistoryItem":
        item = cls.model_validate(scan)
        return item.model_copy(update={"score_label": score_label(scan.overall_score)})
