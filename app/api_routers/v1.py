from fastapi import APIRouter

from app.features.health.routes.health import router as health_router
from app.features.seo.routes.scan import router as scan_router
from app.features.stores.routes.stores import router as stores_router

api_router = APIRouter()

# Register all feature routes
api_router.include_router(health_router)
api_router.include_router(stores_router)
api_router.include_router(scan_router)
