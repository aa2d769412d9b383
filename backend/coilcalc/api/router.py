"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from coilcalc.api.coil_performance import router as coil_performance_router

router = APIRouter()
router.include_router(coil_performance_router)
