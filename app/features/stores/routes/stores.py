from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.stores.dependencies.shop import get_valid_shop
from app.features.stores.schemas.store import StoreResponse
from app.features.stores.services.store_service import get_store_or_404, score_label
from app.platform.db.session import get_db
from app.platform.response import api_response

router = APIRouter(prefix="/stores", tags=["Stores"])


@router.get(
    "/{shop}",
    response_model=dict,
    status_code=status.HTTP_200_OK,
    summary="Get store SEO summary",
    description="Current SEO score and last scan time for a store",
)
async def get_store(
    shop: str = Depends(get_valid_shop),
    db: AsyncSession = Depends(get_db),
):
    store = await get_store_or_404(db, shop)
    response = StoreResponse.model_validate(store).model_copy(
        update={"score_label": score_label(store.seo_score)}
    )

    return api_response(
        data=response,
        message="Store retrieved successfully",
        status_code=status.HTTP_200_OK,
    )
