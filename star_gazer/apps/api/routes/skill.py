"""Skill request endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from star_gazer.apps.api.dependencies import get_executor
from star_gazer.core.exceptions import InvalidApplicationIdError, InvalidRequestError
from star_gazer.core.logging import get_logger
from star_gazer.services.executor import SkillExecutor

router = APIRouter(tags=["skill"])
logger = get_logger(__name__)


@router.post("/skill", response_model=None)
def handle_skill_event(
    event: dict[str, Any] = Body(...),
    executor: SkillExecutor = Depends(get_executor),
) -> dict[str, Any] | Response:
    """Run one skill event and return the response envelope."""
    try:
        envelope = executor.execute(event)
    except InvalidRequestError as exc:
        logger.warning("rejected malformed skill event: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except InvalidApplicationIdError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    if envelope is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return envelope


__all__ = ["router"]
