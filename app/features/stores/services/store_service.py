"""
Store lookup and bookkeeping.

A Store row is created lazily the first time a shop is scanned and keeps
the shop's current SEO score.
"""
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.stores.models.store import Store


def score_label(score: Optional[int]) -> Optional[str]:
    """Dashboard label for an overall score: Good (>=80), Medium (>=50), Poor."""
    if score is None:
        return None
    if score >= 80:
        return "Good"
    if score >= 50:
        return "Medium"
    return "Poor"


async def get_store_by_shop(db: AsyncSession, shop: str) -> Optional[Store]:
    result = await db.execute(select(Store).where(Store.shop == shop))
    return result.scalar_one_or_none()


async def get_store_or_404(db: AsyncSession, shop: str) -> Store:
    store = await get_store_by_shop(db, shop)
    if not store:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Store {shop} has not been scanned yet",
        )
    return store


async def get_or_create_store(db: AsyncSession, shop: str) -> Store:
    """
    Fetch the store row for `shop`, adding a new one to the session if needed.

    Only flushes; the caller owns the transaction.
    """
    store = await get_store_by_shop(db, shop)
    if store:
        return store

    store = Store(shop=shop)
    db.add(store)
    await db.flush()
    return store
