"""Handlers for the platform's built-in stop, cancel, and help intents."""

from __future__ import annotations

from star_gazer.core.models import SpeechInput, SpeechType
from star_gazer.services import ServiceContainer
from star_gazer.services.intent_router import IntentRequest
from star_gazer.services.speech import CANCEL_SPEECH, HELP_SPEECH, STOP_SPEECH


def handle_stop_intent(request: IntentRequest, services: ServiceContainer) -> None:
    """Say goodbye and end the session."""
    _ = services
    request.response.tell(STOP_SPEECH)


def handle_cancel_intent(request: IntentRequest, services: ServiceContainer) -> None:
    """Acknowledge the cancel and keep listening, without a reprompt or card."""
    _ = services
    request.response.ask_with_card(CANCEL_SPEECH)


def handle_help_intent(request: IntentRequest, services: ServiceContainer) -> None:
    """Explain what the skill can do."""
    _ = services
    request.response.ask_with_card(
        SpeechInput(HELP_SPEECH, SpeechType.PLAIN_TEXT),
        SpeechInput(HELP_SPEECH, SpeechType.PLAIN_TEXT),
    )


__all__ = ["handle_stop_intent", "handle_cancel_intent", "handle_help_intent"]
