"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from worstcase.api.worst_case import router as worst_case_router

router = APIRouter()
router.include_router(worst_case_router)
