# This project was developed with assistance from AI tools.
"""Liveness endpoint."""

from fastapi import APIRouter

from ..core.config import settings

router = APIRouter()


@router.get("/")
async def health() -> dict[str, str]:
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "scenario_backend": settings.SCENARIO_BACKEND,
    }
