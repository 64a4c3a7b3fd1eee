from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from app.platform.db.base import BaseModel


class Store(BaseModel):
    """
    A Shopify shop that has been audited at least once.

    `seo_score` and `last_scan_at` mirror the latest successful scan so
    dashboards can read the current score without touching scan history.
    """
    __tablename__ = "stores"

    shop = Column(String(255), unique=True, index=True, nullable=False)  # e.g. my-store.myshopify.com

    # Current score (copied from the latest scan)
    seo_score = Column(Integer, nullable=True)  # 0-100, NULL until first scan
    last_scan_at = Column(DateTime(timezone=True), nullable=True)

    seo_scans = relationship(
        "SEOScan",
        back_populates="store",
        cascade="all, delete-orphan",
        lazy="select",
    )
