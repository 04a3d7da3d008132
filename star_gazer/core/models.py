"""Request and response envelope models exchanged with the voice platform."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

RESPONSE_VERSION = "1.0"


class _EnvelopeModel(BaseModel):
    """Base model mapping snake_case fields onto the camelCase wire format."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Application(_EnvelopeModel):
    """Skill application the request was addressed to."""

    application_id: str


class User(_EnvelopeModel):
    """Platform user that owns the session."""

    user_id: str


class Session(_EnvelopeModel):
    """Conversation-scoped state carried by the platform between turns."""

    session_id: str
    new: bool = False
    application: Optional[Application] = None
    user: Optional[User] = None
    attributes: dict[str, Any] = Field(default_factory=dict)

    @field_validator("attributes", mode="before")
    @classmethod
    def _default_attributes(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def application_id(self) -> Optional[str]:
        """Return the addressed application id, if the platform sent one."""
        return self.application.application_id if self.application else None


class Slot(_EnvelopeModel):
    """A named value extracted from the user's utterance."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    value: Optional[str] = None


class Intent(_EnvelopeModel):
    """Recognized intent name plus its slots."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    slots: dict[str, Slot] = Field(default_factory=dict)

    @field_validator("slots", mode="before")
    @classmethod
    def _default_slots(cls, value: Any) -> Any:
        return {} if value is None else value

    def slot_value(self, name: str) -> Optional[str]:
        """Return the recognized value for slot ``name`` or ``None``."""
        slot = self.slots.get(name)
        if slot is None or not slot.value:
            return None
        return slot.value


class _BaseRequest(_EnvelopeModel):
    request_id: str
    timestamp: Optional[str] = None
    locale: Optional[str] = None


class LaunchRequest(_BaseRequest):
    """User opened the skill without asking for anything specific."""

    type: Literal["LaunchRequest"] = "LaunchRequest"


class IntentRequest(_BaseRequest):
    """User asked for something the interaction model mapped to an intent."""

    type: Literal["IntentRequest"] = "IntentRequest"
    intent: Intent


class SessionEndedRequest(_BaseRequest):
    """Platform notification that the session closed."""

    type: Literal["SessionEndedRequest"] = "SessionEndedRequest"
    reason: Optional[str] = None
    error: Optional[dict[str, Any]] = None


SkillRequest = Annotated[
    Union[LaunchRequest, IntentRequest, SessionEndedRequest],
    Field(discriminator="type"),
]


class SkillEvent(_EnvelopeModel):
    """Complete inbound event: session plus a typed request."""

    version: str = RESPONSE_VERSION
    session: Session
    request: SkillRequest


class SpeechType(str, Enum):
    """Format tag for output speech."""

    PLAIN_TEXT = "PlainText"
    SSML = "SSML"


@dataclass(frozen=True, slots=True)
class SpeechInput:
    """Structured speech accepted by the response builder."""

    speech: str
    type: SpeechType = SpeechType.PLAIN_TEXT


class OutputSpeech(_EnvelopeModel):
    """Speech payload in the platform's wire shape."""

    type: SpeechType
    text: Optional[str] = None
    ssml: Optional[str] = None


class Reprompt(_EnvelopeModel):
    """Speech played when the user stays silent or is not understood."""

    output_speech: OutputSpeech


class Card(_EnvelopeModel):
    """Simple card rendered on devices with a screen."""

    type: Literal["Simple"] = "Simple"
    title: str
    content: str


class ResponseBody(_EnvelopeModel):
    """Speech, optional reprompt and card, and whether the session ends."""

    output_speech: OutputSpeech
    reprompt: Optional[Reprompt] = None
    card: Optional[Card] = None
    should_end_session: bool


def make_event(
    request: Mapping[str, Any],
    *,
    session_id: Optional[str] = None,
    attributes: Optional[Mapping[str, Any]] = None,
    new: bool = False,
    application_id: Optional[str] = None,
) -> dict[str, Any]:
    """Build a raw event dict around ``request`` in the platform's wire shape."""
    session: dict[str, Any] = {
        "sessionId": session_id or f"SessionId.{uuid.uuid4()}",
        "new": new,
        "attributes": dict(attributes or {}),
    }
    if application_id:
        session["application"] = {"applicationId": application_id}
    payload = {"requestId": f"EdwRequestId.{uuid.uuid4()}", **request}
    return {"version": RESPONSE_VERSION, "session": session, "request": payload}


def make_intent_event(
    intent_name: str,
    slots: Optional[Mapping[str, Optional[str]]] = None,
    **kwargs: Any,
) -> dict[str, Any]:
    """Build a raw IntentRequest event for ``intent_name`` with slot values."""
    slot_payload = {
        name: ({"name": name, "value": value} if value is not None else {"name": name})
        for name, value in (slots or {}).items()
    }
    request = {
        "type": "IntentRequest",
        "intent": {"name": intent_name, "slots": slot_payload},
    }
    return make_event(request, **kwargs)


__all__ = [
    "RESPONSE_VERSION",
    "Application",
    "User",
    "Session",
    "Slot",
    "Intent",
    "LaunchRequest",
    "IntentRequest",
    "SessionEndedRequest",
    "SkillRequest",
    "SkillEvent",
    "SpeechType",
    "SpeechInput",
    "OutputSpeech",
    "Reprompt",
    "Card",
    "ResponseBody",
    "make_event",
    "make_intent_event",
]
