from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from app.platform.db.base import BaseModel


class SEOScan(BaseModel):
    """
    Immutable snapshot of one SEO audit run.

    Rows are only ever inserted. The newest row per store (by scanned_at)
    is the store's active scan.
    """
    __tablename__ = "seo_scans"

    store_id = Column(String, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True)

    # Scores (0-100)
    overall_score = Column(Integer, nullable=False)
    content_score = Column(Integer, nullable=False)
    performance_score = Column(Integer, nullable=False)
    accessibility_score = Column(Integer, nullable=False)

    # Tallies (denormalized from issues)
    critical_issues = Column(Integer, default=0, nullable=False)
    improvements = Column(Integer, default=0, nullable=False)
    good_results = Column(Integer, default=0, nullable=False)

    # Issue snapshot, camelCase keys as served to the dashboard
    issues = Column(JSON, nullable=False, default=list)

    crawled_pages = Column(Integer, default=0, nullable=False)

    # Set in Python so ordering has sub-second resolution on every backend
    scanned_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    store = relationship("Store", back_populates="seo_scans", lazy="select")

    __table_args__ = (
        Index("idx_seo_scans_store_scanned", "store_id", "scanned_at"),
    )
