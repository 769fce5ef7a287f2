"""Tests for picovico.client and picovico._http: login, tokens, queries, errors."""

import logging

import httpx
import pytest

from picovico import (
    AuthenticationError,
    NotFoundError,
    NotLoggedInError,
    Picovico,
    PicovicoError,
    VideoSession,
)


# ── Login ───────────────────────────────────────────────────────────────

class TestLogin:
    def test_login_binds_tokens(self, anonymous_client, service):
        assert anonymous_client.is_logged_in is False
        response = anonymous_client.login("me@example.com", "secret")
        assert response["access_key"] == "key-1"
        assert anonymous_client.is_logged_in is True

        sent = service.body(service.calls("POST", "/login")[0])
        assert sent == {"username": "me@example.com", "password": "secret", "device_id": "device-1"}

    def test_login_request_is_anonymous(self, anonymous_client, service):
        anonymous_client.login("me@example.com", "secret")
        request = service.calls("POST", "/login")[0]
        assert "X-Access-Key" not in request.headers

    def test_rejected_login(self, anonymous_client):
        with pytest.raises(AuthenticationError) as exc_info:
            anonymous_client.login("me@example.com", "wrong")
        assert exc_info.value.status_code == 401
        assert not isinstance(exc_info.value, NotLoggedInError)
        assert anonymous_client.is_logged_in is False

    def test_authorized_call_before_login(self, anonymous_client, service):
        with pytest.raises(NotLoggedInError) as exc_info:
            anonymous_client.get_styles()
        assert isinstance(exc_info.value, AuthenticationError)
        assert exc_info.value.status_code is None
        assert service.requests == []

    def test_tokens_are_sent(self, client, service):
        client.get_styles()
        request = service.requests[0]
        assert request.headers["X-Access-Key"] == "key-1"
        assert request.headers["X-Access-Token"] == "token-1"

    def test_set_login_tokens(self, anonymous_client):
        anonymous_client.set_login_tokens("key-1", "token-1")
        assert anonymous_client.get_styles()[0]["machine_name"] == "vanilla"

    def test_device_id_generated_once(self, service):
        calls = []

        def factory():
            calls.append(1)
            return f"device-{len(calls)}"

        with Picovico(base_url="https://api.test", transport=httpx.MockTransport(service),
                      device_id_factory=factory) as client:
            client.login("me@example.com", "secret")
            client.login("me@example.com", "secret")
        assert len(calls) == 1
        assert client.device_id == "device-1"


# ── Queries ─────────────────────────────────────────────────────────────

class TestQueries:
    def test_get_styles(self, client):
        styles = client.get_styles()
        assert [s["machine_name"] for s in styles] == ["vanilla", "sunset"]

    def test_get_video_of_any_status(self, client, service):
        service.videos["vid-3"] = {"id": "vid-3", "status": "published"}
        assert client.get_video("vid-3")["status"] == "published"
        assert client.session.video_id is None

    def test_missing_video(self, client):
        with pytest.raises(NotFoundError) as exc_info:
            client.get_video("nope")
        assert exc_info.value.status_code == 404
        assert "Video not found" in str(exc_info.value)


# ── Errors & transport ──────────────────────────────────────────────────

class TestErrors:
    def _client(self, handler) -> Picovico:
        return Picovico(
            base_url="https://api.test",
            transport=httpx.MockTransport(handler),
            access_key="k",
            access_token="t",
        )

    def test_server_error(self):
        with self._client(lambda request: httpx.Response(500, text="boom")) as client:
            with pytest.raises(PicovicoError) as exc_info:
                client.get_styles()
        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "boom"

    def test_forbidden_is_authentication_error(self):
        handler = lambda request: httpx.Response(403, json={"message": "expired"})
        with self._client(handler) as client:
            with pytest.raises(AuthenticationError):
                client.get_styles()

    def test_network_errors_propagate(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        with self._client(handler) as client:
            with pytest.raises(httpx.ConnectError):
                client.session.open("vid-1")

    def test_empty_body_decodes_to_none(self):
        with self._client(lambda request: httpx.Response(204)) as client:
            assert client.get_styles() is None


# ── Sessions ────────────────────────────────────────────────────────────

class TestSessions:
    def test_new_session_is_independent(self, client):
        other = client.new_session()
        assert isinstance(other, VideoSession)
        client.session.begin("First")
        other.begin("Second")
        assert client.session.video_id == "vid-1"
        assert other.video_id == "vid-2"
        assert client.session.document is not other.document

    def test_debug_attaches_handler(self):
        logger = logging.getLogger("picovico")
        previous_level, previous_handlers = logger.level, list(logger.handlers)
        try:
            logger.handlers = []
            Picovico(debug=True).close()
            assert logger.level == logging.DEBUG
            assert logger.handlers
        finally:
            logger.setLevel(previous_level)
            logger.handlers = previous_handlers
