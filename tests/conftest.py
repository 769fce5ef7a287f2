"""Shared fixtures: an in-memory stand-in for the Picovico service."""

import json
import re

import httpx
import pytest

from picovico import Picovico

BASE_URL = "https://api.test"
ACCESS_KEY = "key-1"
ACCESS_TOKEN = "token-1"


class FakeService:
    """Routes httpx requests the way the remote service would answer them."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.videos: dict[str, dict] = {}
        self.saved: dict[str, list[dict]] = {}
        self.begin_response: dict | None = None
        self.image_response: dict = {"id": "img-1"}
        self.music_response: dict = {"id": "mus-1"}
        self.styles = [{"machine_name": "vanilla"}, {"machine_name": "sunset"}]
        self._next_id = 1

    # helpers used by tests
    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    @staticmethod
    def body(request: httpx.Request):
        return json.loads(request.content) if request.content else None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        method, path = request.method, request.url.path

        if method == "POST" and path == "/login":
            body = self.body(request)
            if body["password"] != "secret":
                return httpx.Response(401, json={"message": "Invalid credentials"})
            return httpx.Response(200, json={"access_key": ACCESS_KEY, "access_token": ACCESS_TOKEN})

        if (
            request.headers.get("X-Access-Key") != ACCESS_KEY
            or request.headers.get("X-Access-Token") != ACCESS_TOKEN
        ):
            return httpx.Response(401, json={"message": "Login required"})

        if method == "GET" and path == "/me/styles":
            return httpx.Response(200, json=self.styles)

        if method == "POST" and path == "/me/images":
            return httpx.Response(200, json=self.image_response)

        if method == "POST" and path == "/me/musics":
            return httpx.Response(200, json=self.music_response)

        if method == "POST" and path == "/me/videos":
            body = self.body(request)
            if self.begin_response is not None:
                return httpx.Response(200, json=self.begin_response)
            video_id = f"vid-{self._next_id}"
            self._next_id += 1
            self.videos[video_id] = {
                "id": video_id,
                "name": body["name"],
                "quality": body["quality"],
                "status": "initial",
                "assets": [],
            }
            return httpx.Response(200, json=self.videos[video_id])

        match = re.fullmatch(r"/me/videos/([^/]+)(/render)?", path)
        if match:
            video_id, render = match.groups()
            if video_id not in self.videos:
                return httpx.Response(404, json={"message": "Video not found"})
            if render and method == "POST":
                self.videos[video_id]["status"] = "processing"
                return httpx.Response(200, json={"id": video_id, "status": "processing"})
            if method == "GET":
                return httpx.Response(200, json=self.videos[video_id])
            if method == "POST":
                self.saved.setdefault(video_id, []).append(self.body(request))
                return httpx.Response(200, json={"id": video_id, "status": "initial"})

        return httpx.Response(500, text="unexpected route")


@pytest.fixture
def service() -> FakeService:
    return FakeService()


@pytest.fixture
def anonymous_client(service):
    with Picovico(
        base_url=BASE_URL,
        transport=httpx.MockTransport(service),
        device_id_factory=lambda: "device-1",
    ) as client:
        yield client


@pytest.fixture
def client(service):
    with Picovico(
        base_url=BASE_URL,
        transport=httpx.MockTransport(service),
        access_key=ACCESS_KEY,
        access_token=ACCESS_TOKEN,
        device_id_factory=lambda: "device-1",
    ) as client:
        yield client
