"""Aggregate all v1 sub-routers."""

from fastapi import APIRouter

from storefront_logo.api.v1.health import router as health_router
from storefront_logo.api.v1.logo import router as logo_router

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["health"])
api_v1_router.include_router(logo_router, prefix="/logo", tags=["logo"])
