"""Intent handler modules and the default routing table."""

from __future__ import annotations

from star_gazer.core.intents import IntentType
from star_gazer.services.intent_router import IntentHandler, IntentRouter

from .builtin_intents import handle_cancel_intent, handle_help_intent, handle_stop_intent
from .constellation_intents import (
    handle_constellations_intent,
    handle_constellations_myth_intent,
    handle_get_more_info_intent,
)

DEFAULT_HANDLERS: dict[IntentType, IntentHandler] = {
    IntentType.CONSTELLATIONS: handle_constellations_intent,
    IntentType.CONSTELLATIONS_MYTH: handle_constellations_myth_intent,
    IntentType.GET_MORE_INFO: handle_get_more_info_intent,
    IntentType.STOP: handle_stop_intent,
    IntentType.CANCEL: handle_cancel_intent,
    IntentType.HELP: handle_help_intent,
}


def build_default_router() -> IntentRouter:
    """Return a router with a handler for every ``IntentType``."""
    router = IntentRouter(DEFAULT_HANDLERS)
    router.ensure_complete()
    return router


__all__ = ["DEFAULT_HANDLERS", "build_default_router"]
