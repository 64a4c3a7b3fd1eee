from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class StoreResponse(BaseModel):
    id: str
    shop: str
    seo_score: Optional[int] = None
    score_label: Optional[str] = None
    last_scan_at: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": "019ac5fd-93bf-7368-9f64-7726995a6a04",
                "shop": "my-store.myshopify.com",
                "seo_score": 79,
                "score_label": "Medium",
                "last_scan_at": "2025-11-28T10:30:00Z",
                "created_at": "2025-11-01T08:00:00Z",
            }
        }
