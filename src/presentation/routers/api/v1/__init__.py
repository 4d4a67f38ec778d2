"""API v1 routers.

RESTful resource-based endpoints. All endpoints use resource nouns, not
action verbs.

Resources:
    /api/v1/products   - Product catalog
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.products import products_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(products_router)

__all__ = [
    "v1_router",
]
