"""API v1: read-only league standings and analysis endpoints."""

from fastapi import APIRouter

from .leagues import router as leagues_router

router = APIRouter(prefix="/api/v1", tags=["api_v1"])
router.include_router(leagues_router)

api_v1_router = router
