"""Protocol definitions for content adapters and skill implementations."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, Protocol

from star_gazer.core.models import Intent, LaunchRequest, Session, SessionEndedRequest

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from star_gazer.services.response_builder import ResponseBuilder


class ContentStorePort(Protocol):
    """Port exposing the read-only constellation text tables."""

    @property
    def info(self) -> Mapping[str, str]:
        """Return the information table keyed by lowercase constellation name."""
        ...

    @property
    def myth(self) -> Mapping[str, str]:
        """Return the myth table keyed by lowercase constellation name."""
        ...

    def get_info(self, name: Optional[str]) -> Optional[str]:
        """Return the information text for ``name`` or ``None``."""
        ...

    def get_myth(self, name: Optional[str]) -> Optional[str]:
        """Return the myth text for ``name`` or ``None``."""
        ...


class SkillPort(Protocol):
    """Capabilities a skill exposes to the request executor."""

    def on_session_started(self, request_id: str, session: Session) -> None:
        """Observe the first turn of a new session."""
        ...

    def on_launch(
        self, request: LaunchRequest, session: Session, response: "ResponseBuilder"
    ) -> None:
        """Greet a user who opened the skill without an intent."""
        ...

    def on_session_ended(self, request: SessionEndedRequest, session: Session) -> None:
        """Observe the end of a session. Must not raise or respond."""
        ...

    def dispatch_intent(
        self, intent: Intent, session: Session, response: "ResponseBuilder"
    ) -> None:
        """Route ``intent`` to exactly one handler."""
        ...


__all__ = ["ContentStorePort", "SkillPort"]
