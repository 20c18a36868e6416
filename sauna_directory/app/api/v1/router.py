"""
Top-level router for version 1 of the API.

Domain routers are aggregated here and mounted by ``main.create_app``.
"""

from fastapi import APIRouter

from .endpoints import saunas, submissions

router = APIRouter()

router.include_router(saunas.router, prefix="/saunas", tags=["saunas"])
router.include_router(submissions.router, prefix="/submissions", tags=["submissions"])
