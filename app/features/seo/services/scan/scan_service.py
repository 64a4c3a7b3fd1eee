"""
Scan Service

Runs a store audit end to end and manages the append-only scan history.
"""
import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.seo.models.seo_scan import SEOScan
from app.features.seo.schemas.analysis import AnalysisResult
from app.features.seo.services.analysis.seo_analyzer import analyze_store_resources
from app.features.seo.services.shopify.graphql_client import ShopifyAdminClient
from app.features.seo.services.shopify.resource_fetcher import fetch_store_resources
from app.features.stores.models.store import Store
from app.features.stores.services.store_service import get_or_create_store, get_store_by_shop
from app.platform.logger import get_logger

logger = get_logger(__name__)

# One lock per shop: overlapping scan requests for the same store run one after another.
# An entry lives only while some request holds or waits on it.
_scan_locks: Dict[str, asyncio.Lock] = {}
_scan_lock_users: Dict[str, int] = defaultdict(int)


@asynccontextmanager
async def scan_lock(shop: str):
    lock = _scan_locks.setdefault(shop, asyncio.Lock())
    _scan_lock_users[shop] += 1
    try:
        async with lock:
            yield
    finally:
        _scan_lock_users[shop] -= 1
        if not _scan_lock_users[shop]:
            del _scan_lock_users[shop]
            del _scan_locks[shop]


async def save_analysis_result(db: AsyncSession, shop: str, result: AnalysisResult) -> SEOScan:
    """
    Append a scan row and point the store's current score at it.

    Both writes share one commit; on failure the session is rolled back
    and the previous scan stays the active one.
    """
    try:
        store = await get_or_create_store(db, shop)
        scanned_at = datetime.now(timezone.utc)

        scan = SEOScan(
            store_id=store.id,
            overall_score=result.overall_score,
            content_score=result.content_score,
            performance_score=result.performance_score,
            accessibility_score=result.accessibility_score,
            critical_issues=result.critical_issues,
            improvements=result.improvements,
            good_results=result.good_results,
            issues=[issue.to_snapshot() for issue in result.issues],
            crawled_pages=result.crawled_pages,
            scanned_at=scanned_at,
        )
        db.add(scan)

        store.seo_score = result.overall_score
        store.last_scan_at = scanned_at

        await db.commit()
        await db.refresh(scan)

        logger.info(
            f"[{shop}] Saved scan {scan.id}: overall={result.overall_score}, content={result.content_score}, "
            f"accessibility={result.accessibility_score}, performance={result.performance_score}, "
            f"issues={len(result.issues)}"
        )
        return scan

    except Exception as e:
        await db.rollback()
        logger.error(f"[{shop}] Failed to save scan results: {e}", exc_info=True)
        raise


async def run_store_scan(db: AsyncSession, shop: str, client: ShopifyAdminClient) -> SEOScan:
    """
    Fetch the store's content, audit it and persist the result.

    A failed fetch raises before anything is scored or written.
    """
    async with scan_lock(shop):
        logger.info(f"[{shop}] Starting SEO scan")

        try:
            resources = await fetch_store_resources(client)
        except Exception as e:
            logger.error(f"[{shop}] Scan aborted, could not fetch store content: {e}")
            raise

        result = analyze_store_resources(resources)
        logger.info(
            f"[{shop}] Analysis complete: {result.crawled_pages} resources, "
            f"{result.critical_issues} critical, {result.improvements} improvements"
        )

        return await save_analysis_result(db, shop, result)


async def get_latest_scan(db: AsyncSession, shop: str) -> Optional[SEOScan]:
    query = (
        select(SEOScan)
        .join(Store, SEOScan.store_id == Store.id)
        .where(Store.shop == shop)
        .order_by(desc(SEOScan.scanned_at), desc(SEOScan.id))
        .limit(1)
    )
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def get_scan_history(db: AsyncSession, shop: str, limit: int = 20) -> List[SEOScan]:
    store = await get_store_by_shop(db, shop)
    if not store:
        return []

    query = (
        select(SEOScan)
        .where(SEOScan.store_id == store.id)
        .order_by(desc(SEOScan.scanned_at), desc(SEOScan.id))
        .limit(limit)
    )
    result = await db.execute(query)
    scans = list(result.scalars().all())

    logger.info(f"[{shop}] Found {len(scans)} scans")
    return scans


async def get_scan_by_id(db: AsyncSession, shop: str, scan_id: str) -> SEOScan:
    query = (
        select(SEOScan)
        .join(Store, SEOScan.store_id == Store.id)
        .where(Store.shop == shop, SEOScan.id == scan_id)
    )
    result = await db.execute(query)
    scan = result.scalar_one_or_none()

    if not scan:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Scan {scan_id} not found for {shop}",
        )
    return scan
