from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.seo.dependencies.shopify import get_shopify_client
from app.features.seo.schemas.analysis import GroupedIssuesResponse
from app.features.seo.schemas.scan import ScanHistoryItem, ScanResponse
from app.features.seo.services.issue.issue_service import count_issues_by_type, group_issues_by_type
from app.features.seo.services.scan.scan_service import (
    get_latest_scan,
    get_scan_by_id,
    get_scan_history,
    run_store_scan,
)
from app.features.seo.services.shopify.graphql_client import ShopifyAdminClient
from app.features.stores.dependencies.shop import get_valid_shop
from app.platform.config import settings
from app.platform.db.session import get_db
from app.platform.logger import get_logger
from app.platform.response import api_response

logger = get_logger(__name__)

router = APIRouter(prefix="/stores/{shop}/scans", tags=["SEO Scans"])


async def _latest_scan_or_404(db: AsyncSession, shop: str):
    scan = await get_latest_scan(db, shop)
    if not scan:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No scans found for {shop}",
        )
    return scan


@router.post(
    "",
    response_model=dict,
    status_code=status.HTTP_201_CREATED,
    summary="Run an SEO scan",
    description="""
    Crawl the store's products, collections, pages and blog articles,
    audit them and append the result to the scan history.

    If Shopify can't be reached the scan is aborted (502) and the
    previous scan stays current.
    """,
)
async def start_scan(
    shop: str = Depends(get_valid_shop),
    client: ShopifyAdminClient = Depends(get_shopify_client),
    db: AsyncSession = Depends(get_db),
):
    scan = await run_store_scan(db, shop, client)

    return api_response(
        data=ScanResponse.from_scan(scan),
        message="Scan completed successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get(
    "",
    response_model=dict,
    summary="Scan history",
    description="Previous scans for the store, newest first",
)
async def list_scans(
    shop: str = Depends(get_valid_shop),
    limit: int = Query(settings.SCAN_HISTORY_LIMIT, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    scans = await get_scan_history(db, shop, limit=limit)

    return api_response(
        data=[ScanHistoryItem.from_scan(scan) for scan in scans],
        message="Scan history retrieved successfully",
    )


@router.get(
    "/latest",
    response_model=dict,
    summary="Latest scan",
)
async def latest_scan(
    shop: str = Depends(get_valid_shop),
    db: AsyncSession = Depends(get_db),
):
    scan = await _latest_scan_or_404(db, shop)

    return api_response(
        data=ScanResponse.from_scan(scan),
        message="Latest scan retrieved successfully",
    )


@router.get(
    "/latest/issues",
    response_model=dict,
    summary="Latest scan issues grouped by type",
)
async def latest_scan_issues(
    shop: str = Depends(get_valid_shop),
    db: AsyncSession = Depends(get_db),
):
    scan = await _latest_scan_or_404(db, shop)
    issues = scan.issues or []

    grouped = GroupedIssuesResponse(
        scan_id=scan.id,
        counts=count_issues_by_type(issues),
        **group_issues_by_type(issues),
    )

    return api_response(
        data=grouped,
        message="Issues retrieved successfully",
    )


@router.get(
    "/{scan_id}",
    response_model=dict,
    summary="Get a scan",
)
async def get_scan(
    scan_id: str,
    shop: str = Depends(get_valid_shop),
    db: AsyncSession = Depends(get_db),
):
    scan = await get_scan_by_id(db, shop, scan_id)

    return api_response(
        data=ScanResponse.from_scan(scan),
        message="Scan retrieved successfully",
    )
