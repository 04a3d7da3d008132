"""Star Gazer lifecycle handlers and intent dispatch."""

from __future__ import annotations

from dataclasses import dataclass

from star_gazer.core.intents import IntentType
from star_gazer.core.logging import get_logger
from star_gazer.core.models import Intent, LaunchRequest, Session, SessionEndedRequest
from star_gazer.services import ServiceContainer
from star_gazer.services.intent_router import (
    IntentHandlerNotFoundError,
    IntentRequest,
    IntentRouter,
)
from star_gazer.services.response_builder import ResponseBuilder
from star_gazer.services.speech import (
    HELP_SPEECH,
    UNHANDLED_INTENT_SPEECH,
    WELCOME_REPROMPT,
    WELCOME_SPEECH,
)

logger = get_logger(__name__)


@dataclass(slots=True)
class StarGazerSkill:
    """Skill capabilities composed from a service container."""

    services: ServiceContainer

    @property
    def router(self) -> IntentRouter:
        router = self.services.intent_router
        if router is None:
            raise RuntimeError("IntentRouter has not been configured.")
        return router

    def on_session_started(self, request_id: str, session: Session) -> None:
        logger.info(
            "session started",
            extra={"request_id": request_id, "new_session": session.new},
        )

    def on_launch(
        self, request: LaunchRequest, session: Session, response: ResponseBuilder
    ) -> None:
        _ = request, session
        response.ask(WELCOME_SPEECH, WELCOME_REPROMPT)

    def on_session_ended(self, request: SessionEndedRequest, session: Session) -> None:
        logger.info(
            "session ended",
            extra={
                "request_id": request.request_id,
                "reason": request.reason,
            },
        )

    def dispatch_intent(self, intent: Intent, session: Session, response: ResponseBuilder) -> None:
        """Route ``intent`` to its handler, falling back when none matches."""
        intent_type = IntentType.parse(intent.name)
        if intent_type is None:
            logger.warning("unrecognized intent", extra={"intent": intent.name})
            self._unhandled(response)
            return

        request = IntentRequest(
            intent_type=intent_type, intent=intent, session=session, response=response
        )
        try:
            self.router.dispatch(request, self.services)
        except IntentHandlerNotFoundError:
            logger.warning("no handler for intent", extra={"intent": intent.name})
            self._unhandled(response)

    @staticmethod
    def _unhandled(response: ResponseBuilder) -> None:
        response.ask(UNHANDLED_INTENT_SPEECH, HELP_SPEECH)


__all__ = ["StarGazerSkill"]
