"""Response builder: normalizes speech and emits ask/tell envelopes."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from star_gazer.core.exceptions import ResponseAlreadySentError
from star_gazer.core.models import (
    RESPONSE_VERSION,
    Card,
    OutputSpeech,
    Reprompt,
    ResponseBody,
    Session,
    SpeechInput,
    SpeechType,
)

Speech = Union[str, SpeechInput, Mapping[str, Any]]


def to_output_speech(speech: Optional[Speech]) -> Optional[OutputSpeech]:
    """Normalize a bare string, ``SpeechInput`` or ``{speech, type}`` mapping.

    Bare strings are plain text. ``None`` stays ``None`` so callers can treat
    an absent reprompt uniformly.
    """
    if speech is None:
        return None
    if isinstance(speech, str):
        return OutputSpeech(type=SpeechType.PLAIN_TEXT, text=speech)
    if isinstance(speech, SpeechInput):
        text, speech_type = speech.speech, speech.type
    else:
        text = str(speech.get("speech") or "")
        speech_type = SpeechType(speech.get("type") or SpeechType.PLAIN_TEXT)
    if speech_type is SpeechType.SSML:
        return OutputSpeech(type=SpeechType.SSML, ssml=text)
    return OutputSpeech(type=SpeechType.PLAIN_TEXT, text=text)


class ResponseBuilder:
    """Collects the single response a handler emits for one request."""

    def __init__(self, session: Session) -> None:
        self._session = session
        self._body: Optional[ResponseBody] = None

    @property
    def emitted(self) -> bool:
        """Return True once any emission mode has been called."""
        return self._body is not None

    @property
    def body(self) -> Optional[ResponseBody]:
        return self._body

    def ask(self, speech: Speech, reprompt: Optional[Speech]) -> None:
        """Speak and keep the session open, reprompting with ``reprompt``."""
        self._emit(speech, reprompt=reprompt, should_end_session=False)

    def ask_with_card(
        self,
        speech: Speech,
        reprompt: Optional[Speech] = None,
        card_title: Optional[str] = None,
        card_content: Optional[str] = None,
    ) -> None:
        """Speak, keep the session open, and optionally attach a card."""
        self._emit(
            speech,
            reprompt=reprompt,
            card_title=card_title,
            card_content=card_content,
            should_end_session=False,
        )

    def tell(self, speech: Speech) -> None:
        """Speak and end the session."""
        self._emit(speech, should_end_session=True)

    def tell_with_card(self, speech: Speech, card_title: str, card_content: str) -> None:
        """Speak, attach a card, and end the session."""
        self._emit(
            speech,
            card_title=card_title,
            card_content=card_content,
            should_end_session=True,
        )

    def envelope(self) -> dict[str, Any]:
        """Return the wire-format envelope including session attributes."""
        if self._body is None:
            raise RuntimeError("No response has been emitted.")
        return {
            "version": RESPONSE_VERSION,
            "response": self._body.model_dump(by_alias=True, exclude_none=True, mode="json"),
            "sessionAttributes": dict(self._session.attributes),
        }

    def _emit(
        self,
        speech: Speech,
        *,
        should_end_session: bool,
        reprompt: Optional[Speech] = None,
        card_title: Optional[str] = None,
        card_content: Optional[str] = None,
    ) -> None:
        if self._body is not None:
            raise ResponseAlreadySentError("A response was already emitted for this request.")
        output_speech = to_output_speech(speech)
        if output_speech is None:
            raise ValueError("speech is required")
        reprompt_speech = to_output_speech(reprompt)
        card = Card(title=card_title, content=card_content) if card_title and card_content else None
        self._body = ResponseBody(
            output_speech=output_speech,
            reprompt=Reprompt(output_speech=reprompt_speech) if reprompt_speech else None,
            card=card,
            should_end_session=should_end_session,
        )


__all__ = ["Speech", "ResponseBuilder", "to_output_speech"]
