from __future__ import annotations

import logging
import uuid
from typing import Any, Callable, Optional

import httpx

from . import urls
from ._http import ANONYMOUS, HttpClient
from .resources.session import VideoSession
from .resources.uploads import UploadsResource

logger = logging.getLogger("picovico")

VERSION = "2.0.1"
API_VERSION = "2.0"
API_SERVER = "uapi-f1.picovico.com"

_DEFAULT_BASE_URL = f"https://{API_SERVER}/v{API_VERSION}"


def _random_device_id() -> str:
    return uuid.uuid4().hex


class Picovico:
    """Top-level Picovico API client.

    One client is one logged in account with one active video project
    (:attr:`session`).  The client manages an underlying HTTP connection
    pool; close it when you are done, either by calling :meth:`close` or by
    using the client as a context manager::

        with Picovico() as client:
            client.login("me@example.com", "secret")
            client.session.begin("My Video")
            client.session.add_text("Hi", "Welcome")
            client.session.create()
    """

    session: VideoSession
    """The active video project.

    See :class:`VideoSession` for ``begin``/``open``/``save``/``create`` and
    the slide builders.
    """

    uploads: UploadsResource
    """Image and music uploads. See :class:`UploadsResource`."""

    def __init__(
        self,
        base_url: str = _DEFAULT_BASE_URL,
        timeout: float = 60.0,
        debug: bool = False,
        access_key: Optional[str] = None,
        access_token: Optional[str] = None,
        device_id_factory: Callable[[], str] = _random_device_id,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            base_url: Override the API base URL, e.g. for a staging server.
                Defaults to ``https://uapi-f1.picovico.com/v2.0``.
            timeout: HTTP request timeout in seconds. Defaults to 60.
            debug: Set to ``True`` to enable verbose request/response
                logging via the ``picovico`` logger.
            access_key: Access key saved from an earlier :meth:`login`.
                Used together with *access_token* to skip logging in.
            access_token: Access token saved from an earlier :meth:`login`.
            device_id_factory: Returns the device identifier sent on
                login. Called once per client. Defaults to a random UUID.
            transport: Custom ``httpx`` transport. Mostly useful in tests.
        """
        if debug:
            logging.getLogger("picovico").setLevel(logging.DEBUG)
            if not logging.getLogger("picovico").handlers:
                logging.getLogger("picovico").addHandler(logging.StreamHandler())

        self._http = HttpClient(base_url=base_url, timeout=timeout, transport=transport)
        self._device_id_factory = device_id_factory
        self._device_id: Optional[str] = None
        if access_key and access_token:
            self.set_login_tokens(access_key, access_token)

        self.uploads = UploadsResource(self._http)
        self.session = VideoSession(self._http, self.uploads)

    @property
    def device_id(self) -> str:
        if self._device_id is None:
            self._device_id = self._device_id_factory()
        return self._device_id

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def login(self, username: str, password: str) -> dict[str, Any]:
        """Log in with a Picovico username and password.

        On success the returned ``access_key`` and ``access_token`` are used
        for every following request.  Store them and pass them to
        :meth:`set_login_tokens` later to skip this step.

        Returns:
            The login response from the service.

        Raises:
            AuthenticationError: if the credentials are rejected.
        """
        params = {"username": username, "password": password, "device_id": self.device_id}
        response = self._http.post(urls.LOGIN, json=params, auth=ANONYMOUS) or {}
        if response.get("access_key") and response.get("access_token"):
            self.set_login_tokens(response["access_key"], response["access_token"])
            logger.debug("logged in as %s", username)
        return response

    def set_login_tokens(self, access_key: str, access_token: str) -> None:
        """Continue with tokens from an earlier login."""
        self._http.set_tokens(access_key, access_token)

    @property
    def is_logged_in(self) -> bool:
        return self._http.is_authorized

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_styles(self) -> Any:
        """Return the styles available to the logged in account."""
        return self._http.get(urls.GET_STYLES)

    def get_video(self, video_id: str) -> dict[str, Any]:
        """Fetch any video, rendered or not. Use ``session.open()`` to edit one."""
        return self._http.get(urls.SINGLE_VIDEO.format(video_id=video_id))

    def new_session(self) -> VideoSession:
        """Return a further, independent project session on this account."""
        return VideoSession(self._http, self.uploads)

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def __enter__(self) -> "Picovico":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()
