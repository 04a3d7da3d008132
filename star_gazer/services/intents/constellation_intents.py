"""Constellation lookups: information, myth, and the "tell me more" follow-up."""

from __future__ import annotations

from typing import Optional

from star_gazer.core.intents import CONSTELLATION_SLOT
from star_gazer.core.logging import get_logger
from star_gazer.core.models import SpeechInput
from star_gazer.services import ServiceContainer
from star_gazer.services.intent_router import IntentRequest
from star_gazer.services.speech import (
    INFO_CARD_SUFFIX,
    MORE_INFO_PROMPT,
    MYTH_CARD_SUFFIX,
    MYTH_FOLLOW_UP,
    MYTH_REPROMPT,
    NO_CONTEXT_SPEECH,
    NOT_FOUND_SPEECH,
)

logger = get_logger(__name__)

SESSION_CONSTELLATION_KEY = "constellationName"


def _requested_constellation(request: IntentRequest) -> Optional[str]:
    value = request.intent.slot_value(CONSTELLATION_SLOT)
    return value.lower() if value else None


def _apologize(request: IntentRequest) -> None:
    request.response.ask_with_card(NOT_FOUND_SPEECH, NOT_FOUND_SPEECH)


def handle_constellations_intent(request: IntentRequest, services: ServiceContainer) -> None:
    """Tell the user about a constellation and offer to say more.

    The requested name is written to the session even when the slot is missing.
    """
    name = _requested_constellation(request)
    request.session.attributes[SESSION_CONSTELLATION_KEY] = name

    info = services.require_content().get_info(name)
    if not info:
        logger.info("no constellation information", extra={"constellation": name})
        _apologize(request)
        return

    request.response.ask_with_card(
        SpeechInput(info + MORE_INFO_PROMPT),
        SpeechInput(MORE_INFO_PROMPT),
        f"{name}{INFO_CARD_SUFFIX}",
        info,
    )


def handle_constellations_myth_intent(request: IntentRequest, services: ServiceContainer) -> None:
    """Tell the myth behind a constellation."""
    name = _requested_constellation(request)

    myth = services.require_content().get_myth(name)
    if not myth:
        logger.info("no constellation myth", extra={"constellation": name})
        _apologize(request)
        return

    request.response.ask_with_card(
        SpeechInput(myth + MYTH_FOLLOW_UP),
        SpeechInput(MYTH_REPROMPT),
        f"{name}{MYTH_CARD_SUFFIX}",
        myth,
    )


def handle_get_more_info_intent(request: IntentRequest, services: ServiceContainer) -> None:
    """Tell the myth for the constellation discussed last, then end the session."""
    stored = request.session.attributes.get(SESSION_CONSTELLATION_KEY)
    name = stored.lower() if isinstance(stored, str) and stored else None
    myth = services.require_content().get_myth(name) if name else None
    if not myth:
        logger.info("no prior constellation context", extra={"constellation": name})
        request.response.ask_with_card(NO_CONTEXT_SPEECH, NO_CONTEXT_SPEECH)
        return

    request.response.tell_with_card(SpeechInput(myth), f"{name}{MYTH_CARD_SUFFIX}", myth)


__all__ = [
    "SESSION_CONSTELLATION_KEY",
    "handle_constellations_intent",
    "handle_constellations_myth_intent",
    "handle_get_more_info_intent",
]
