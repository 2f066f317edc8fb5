"""
API routes aggregation.
"""

from fastapi import APIRouter

from .customizer import router as customizer_router

router = APIRouter()

router.include_router(customizer_router, prefix="/customizer", tags=["customizer"])
