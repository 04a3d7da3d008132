"""Intent router and the request model handed to intent handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Mapping, MutableMapping

from star_gazer.core.intents import IntentType
from star_gazer.core.models import Intent, Session

from .response_builder import ResponseBuilder

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from . import ServiceContainer


@dataclass(slots=True)
class IntentRequest:
    """One intent invocation: the parsed intent, session, and response sink."""

    intent_type: IntentType
    intent: Intent
    session: Session
    response: ResponseBuilder


IntentHandler = Callable[[IntentRequest, "ServiceContainer"], None]


class IntentRouterError(RuntimeError):
    """Base error for router failures."""


class IntentHandlerNotFoundError(IntentRouterError):
    """Raised when no handler is registered for the requested intent."""


class IntentRouter:
    """Dispatch intents to registered handlers."""

    def __init__(self, handlers: Mapping[IntentType, IntentHandler] | None = None) -> None:
        self._handlers: MutableMapping[IntentType, IntentHandler] = dict(handlers or {})

    def register(self, intent: IntentType, handler: IntentHandler) -> None:
        """Register or replace a handler for ``intent``."""

        self._handlers[intent] = handler

    def unregister(self, intent: IntentType) -> None:
        """Remove a handler if present."""

        self._handlers.pop(intent, None)

    def dispatch(self, request: IntentRequest, services: "ServiceContainer") -> None:
        """Invoke the handler for ``request.intent_type`` with the provided services."""

        try:
            handler = self._handlers[request.intent_type]
        except KeyError as exc:
            raise IntentHandlerNotFoundError(
                f"No handler registered for intent {request.intent_type.value}"
            ) from exc
        handler(request, services)

    def missing(self) -> list[IntentType]:
        """Return the intent types that have no registered handler."""

        return [intent for intent in IntentType if intent not in self._handlers]

    def ensure_complete(self) -> None:
        """Raise unless every ``IntentType`` has a handler."""

        missing = self.missing()
        if missing:
            names = ", ".join(intent.value for intent in missing)
            raise IntentRouterError(f"No handler registered for intents: {names}")

    def handlers(self) -> Mapping[IntentType, IntentHandler]:
        """Return a shallow copy of the current intent handler registry."""

        return dict(self._handlers)


__all__ = [
    "IntentRouter",
    "IntentRouterError",
    "IntentHandlerNotFoundError",
    "IntentHandler",
    "IntentRequest",
]
