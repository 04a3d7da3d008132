"""Health and readiness routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from star_gazer import STAR_GAZER_VERSION

router = APIRouter()


@router.get("/")
def read_root() -> dict[str, str]:
    """Health/info endpoint with a short usage message."""
    return {"message": "Star Gazer skill endpoint. POST skill events to /skill."}


@router.get("/alive")
async def alive_check() -> JSONResponse:
    """Health check endpoint for infrastructure probes."""
    return JSONResponse({"status": "ok", "version": STAR_GAZER_VERSION})


__all__ = ["router"]
