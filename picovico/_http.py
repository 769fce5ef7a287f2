"""Internal HTTP client, not part of the public API."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from .exceptions import AuthenticationError, NotFoundError, NotLoggedInError, PicovicoError

logger = logging.getLogger("picovico")

ANONYMOUS = "anonymous"
AUTHORIZED = "authorized"


class HttpClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._access_key: str | None = None
        self._access_token: str | None = None
        self._client = httpx.Client(
            headers={"Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def set_tokens(self, access_key: str, access_token: str) -> None:
        self._access_key = access_key
        self._access_token = access_token

    @property
    def is_authorized(self) -> bool:
        return bool(self._access_key and self._access_token)

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def get(self, path: str, auth: str = AUTHORIZED, **params: Any) -> Any:
        return self.request("GET", path, params=params or None, auth=auth)

    def post(self, path: str, json: Any = None, auth: str = AUTHORIZED, **kwargs: Any) -> Any:
        return self.request("POST", path, json=json, auth=auth, **kwargs)

    def request(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        auth: str = AUTHORIZED,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> Any:
        headers = dict(headers or {})
        if auth == AUTHORIZED:
            if not self.is_authorized:
                raise NotLoggedInError("Not logged in. Call login() or set_login_tokens() first.")
            headers["X-Access-Key"] = self._access_key
            headers["X-Access-Token"] = self._access_token

        url = f"{self._base_url}{path}"
        logger.debug("%s %s  body=%s", method, url, kwargs.get("json") or kwargs.get("data"))

        if timeout is not None:
            kwargs["timeout"] = timeout
        response = self._client.request(method, url, headers=headers, **kwargs)

        logger.debug("← %s %s", response.status_code, url)

        self._raise_for_status(response)
        if not response.content:
            return None
        return response.json()

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return
        try:
            body = response.json()
            detail = body.get("message") or body.get("detail") or response.text
        except Exception:
            detail = response.text

        status = response.status_code
        if status in (401, 403):
            raise AuthenticationError(detail or "Invalid or expired login tokens.", status_code=status, detail=detail)
        if status == 404:
            raise NotFoundError(detail or "Resource not found.", status_code=status)
        raise PicovicoError(detail or f"HTTP {status}", status_code=status, detail=detail)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()
