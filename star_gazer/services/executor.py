"""Request executor: validates an inbound event and drives the skill.

The executor is the seam between a transport (Lambda, HTTP, CLI) and the skill.
It checks the addressed application id, notifies the skill of new sessions,
selects the lifecycle handler for the request type, and returns the response
envelope. Session-ended requests return ``None``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import ValidationError

from star_gazer.core.exceptions import (
    InvalidApplicationIdError,
    InvalidRequestError,
    SkillError,
)
from star_gazer.core.logging import correlation_id_context, get_logger, session_id_context
from star_gazer.core import models
from star_gazer.core.models import LaunchRequest, SessionEndedRequest, SkillEvent
from star_gazer.core.ports import SkillPort
from star_gazer.services.response_builder import ResponseBuilder

logger = get_logger(__name__)


def parse_event(event: Mapping[str, Any]) -> SkillEvent:
    """Validate a raw event dict into a ``SkillEvent``."""
    try:
        return SkillEvent.model_validate(event)
    except ValidationError as exc:
        raise InvalidRequestError(f"malformed skill event: {exc.error_count()} error(s)") from exc


class SkillExecutor:
    """Run one request through a skill and collect its response."""

    def __init__(self, skill: SkillPort, *, application_id: Optional[str] = None) -> None:
        self._skill = skill
        self._application_id = application_id

    def execute(self, event: Mapping[str, Any], context: Any = None) -> dict[str, Any] | None:
        """Handle ``event`` and return the response envelope, if any."""
        _ = context
        parsed = parse_event(event)
        session = parsed.session
        request = parsed.request

        with correlation_id_context(request.request_id), session_id_context(session.session_id):
            self._verify_application_id(session.application_id)

            if session.new:
                self._skill.on_session_started(request.request_id, session)

            if isinstance(request, SessionEndedRequest):
                self._end_session(request, parsed)
                return None

            response = ResponseBuilder(session)
            if isinstance(request, LaunchRequest):
                self._skill.on_launch(request, session, response)
            elif isinstance(request, models.IntentRequest):
                logger.info("intent received", extra={"intent": request.intent.name})
                self._skill.dispatch_intent(request.intent, session, response)

            if not response.emitted:
                raise SkillError(f"{request.type} produced no response")
            return response.envelope()

    def _verify_application_id(self, received: Optional[str]) -> None:
        if self._application_id and received != self._application_id:
            logger.warning("application id mismatch", extra={"application_id": received})
            raise InvalidApplicationIdError("Invalid applicationId")

    def _end_session(self, request: SessionEndedRequest, event: SkillEvent) -> None:
        # The channel is already closing; a failure here is logged, never surfaced.
        try:
            self._skill.on_session_ended(request, event.session)
        except Exception:  # pylint: disable=broad-except
            logger.exception("session end handler failed")


__all__ = ["SkillExecutor", "parse_event"]
