"""Tests for the HTTP skill endpoint."""
# pylint: disable=missing-function-docstring,redefined-outer-name

from http import HTTPStatus

import pytest
from fastapi.testclient import TestClient

from star_gazer.apps.api.app import create_app
from star_gazer.core.config import settings
from star_gazer.core.models import make_event, make_intent_event
from star_gazer.services import ServiceContainer


@pytest.fixture
def client(services: ServiceContainer, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    """Create a test client over the test content without an application id check."""
    monkeypatch.setattr(settings, "STAR_GAZER_APP_ID", None)
    return TestClient(create_app(services))


def test_create_app_serves_its_routes(client: TestClient, services: ServiceContainer) -> None:
    assert client.get("/").status_code == HTTPStatus.OK
    assert client.get("/alive").status_code == HTTPStatus.OK
    launch = client.post("/skill", json=make_event({"type": "LaunchRequest"}, new=True))
    assert launch.status_code == HTTPStatus.OK
    assert launch.json()["response"]["shouldEndSession"] is False
    assert client.app.state.services is services  # type: ignore[attr-defined]


def test_create_app_requires_services() -> None:
    with pytest.raises(RuntimeError):
        create_app()


def test_alive_reports_ok(client: TestClient) -> None:
    resp = client.get("/alive")
    assert resp.status_code == HTTPStatus.OK
    assert resp.json()["status"] == "ok"


def test_skill_event_returns_envelope(client: TestClient) -> None:
    resp = client.post(
        "/skill", json=make_intent_event("ConstellationsIntent", {"Constellation": "Leo"})
    )

    assert resp.status_code == HTTPStatus.OK
    body = resp.json()
    assert body["version"] == "1.0"
    assert body["response"]["card"]["title"] == "leo: Information"
    assert body["sessionAttributes"] == {"constellationName": "leo"}


def test_correlation_id_is_echoed(client: TestClient) -> None:
    resp = client.post(
        "/skill",
        json=make_intent_event("AMAZON.StopIntent"),
        headers={"X-Request-ID": "req-123"},
    )
    assert resp.headers["X-Request-ID"] == "req-123"
    assert resp.headers["X-Correlation-ID"] == "req-123"


def test_session_ended_returns_no_content(client: TestClient) -> None:
    resp = client.post("/skill", json=make_event({"type": "SessionEndedRequest"}))
    assert resp.status_code == HTTPStatus.NO_CONTENT
    assert resp.content == b""


def test_malformed_event_is_bad_request(client: TestClient) -> None:
    resp = client.post("/skill", json={"request": {"type": "LaunchRequest"}})
    assert resp.status_code == HTTPStatus.BAD_REQUEST


def test_wrong_application_id_is_forbidden(
    services: ServiceContainer, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(settings, "STAR_GAZER_APP_ID", "amzn1.echo-sdk-ams.app.expected")
    client = TestClient(create_app(services))

    resp = client.post(
        "/skill", json=make_intent_event("AMAZON.HelpIntent", application_id="other")
    )
    assert resp.status_code == HTTPStatus.FORBIDDEN

    ok = client.post(
        "/skill",
        json=make_intent_event(
            "AMAZON.HelpIntent", application_id="amzn1.echo-sdk-ams.app.expected"
        ),
    )
    assert ok.status_code == HTTPStatus.OK


def test_api_factory_serves_packaged_content(monkeypatch: pytest.MonkeyPatch) -> None:
    from star_gazer import api_factory  # pylint: disable=import-outside-toplevel

    monkeypatch.setattr(settings, "STAR_GAZER_APP_ID", None)
    client = TestClient(api_factory.create_app())

    resp = client.post(
        "/skill", json=make_intent_event("ConstellationsIntent", {"Constellation": "Orion"})
    )
    assert resp.status_code == HTTPStatus.OK
    assert resp.json()["response"]["card"]["title"] == "orion: Information"
