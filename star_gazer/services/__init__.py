"""Application service layer: content access and intent routing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from star_gazer.core.ports import ContentStorePort

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .intent_router import IntentRouter


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    content: Optional[ContentStorePort] = None
    intent_router: Optional["IntentRouter"] = None

    def require_content(self) -> ContentStorePort:
        """Return the content store or raise if it was not wired."""
        if self.content is None:
            raise RuntimeError("ContentStorePort has not been configured.")
        return self.content


def build_default_services(
    *,
    content_port: Optional[ContentStorePort] = None,
) -> ServiceContainer:
    """Return a service container with every intent handler registered."""

    from .intents import build_default_router  # pylint: disable=import-outside-toplevel

    return ServiceContainer(content=content_port, intent_router=build_default_router())


__all__ = ["ServiceContainer", "build_default_services"]
