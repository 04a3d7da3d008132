"""Tests for the request and response envelope models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from star_gazer.core import models
from star_gazer.core.intents import CONSTELLATION_SLOT, IntentType


def test_skill_event_parses_intent_request() -> None:
    """Intent requests parse into typed models with slots and attributes."""
    raw = models.make_intent_event(
        "ConstellationsIntent",
        {CONSTELLATION_SLOT: "Ursa Minor"},
        session_id="session-1",
        attributes={"constellationName": "leo"},
        application_id="amzn1.echo-sdk-ams.app.test",
    )

    event = models.SkillEvent.model_validate(raw)

    assert isinstance(event.request, models.IntentRequest)
    assert event.request.intent.slot_value(CONSTELLATION_SLOT) == "Ursa Minor"
    assert event.session.session_id == "session-1"
    assert event.session.attributes == {"constellationName": "leo"}
    assert event.session.application_id == "amzn1.echo-sdk-ams.app.test"


def test_session_attributes_default_to_empty_dict() -> None:
    """Null or absent attributes become an empty dict the handlers can write to."""
    for attributes in (None, {}):
        session = models.Session.model_validate(
            {"sessionId": "s", "new": True, "attributes": attributes}
        )
        assert session.attributes == {}
    assert models.Session.model_validate({"sessionId": "s"}).attributes == {}


def test_session_user_keeps_only_the_user_id() -> None:
    """Account-linking tokens on the wire are ignored; only the user id is modeled."""
    session = models.Session.model_validate(
        {"sessionId": "s", "user": {"userId": "amzn1.account.1", "accessToken": "secret"}}
    )

    assert session.user is not None
    assert session.user.user_id == "amzn1.account.1"
    assert set(models.User.model_fields) == {"user_id"}


def test_slot_value_treats_missing_and_empty_as_absent() -> None:
    """A slot with no recognized value reads as ``None``."""
    intent = models.Intent.model_validate(
        {
            "name": IntentType.CONSTELLATIONS.value,
            "slots": {"Constellation": {"name": "Constellation"}},
        }
    )
    assert intent.slot_value(CONSTELLATION_SLOT) is None
    assert intent.slot_value("Other") is None

    empty = models.Intent.model_validate(
        {"name": "ConstellationsIntent", "slots": {"Constellation": {"name": "c", "value": ""}}}
    )
    assert empty.slot_value(CONSTELLATION_SLOT) is None

    no_slots = models.Intent.model_validate({"name": "AMAZON.HelpIntent", "slots": None})
    assert no_slots.slots == {}


def test_launch_and_session_ended_requests_are_discriminated() -> None:
    """The request ``type`` selects the request model."""
    launch = models.SkillEvent.model_validate(models.make_event({"type": "LaunchRequest"}))
    ended = models.SkillEvent.model_validate(
        models.make_event({"type": "SessionEndedRequest", "reason": "USER_INITIATED"})
    )

    assert isinstance(launch.request, models.LaunchRequest)
    assert isinstance(ended.request, models.SessionEndedRequest)
    assert ended.request.reason == "USER_INITIATED"


def test_unknown_request_type_is_rejected() -> None:
    """Request types outside the envelope fail validation."""
    with pytest.raises(ValidationError):
        models.SkillEvent.model_validate(models.make_event({"type": "AudioPlayer.PlaybackStarted"}))


def test_intent_is_immutable() -> None:
    """Intents are created per request and never modified by handlers."""
    intent = models.Intent(name="AMAZON.StopIntent")
    with pytest.raises(ValidationError):
        intent.name = "AMAZON.HelpIntent"  # type: ignore[misc]


def test_response_body_serializes_to_wire_format() -> None:
    """Response bodies dump with camelCase keys and omit empty optionals."""
    body = models.ResponseBody(
        output_speech=models.OutputSpeech(type=models.SpeechType.PLAIN_TEXT, text="Hi"),
        should_end_session=True,
    )

    assert body.model_dump(by_alias=True, exclude_none=True, mode="json") == {
        "outputSpeech": {"type": "PlainText", "text": "Hi"},
        "shouldEndSession": True,
    }
