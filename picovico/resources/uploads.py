from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from .. import urls

if TYPE_CHECKING:
    from .._http import HttpClient

logger = logging.getLogger("picovico")

HOSTED = "hosted"


class UploadsResource:
    """Accessed via client.uploads; adds media to the logged in account.

    Media is either sent from a local file or referenced by URL.  Referenced
    media (``source="hosted"`` or any other provider name) is never fetched
    locally; the service downloads it.  The returned dict carries the new
    asset ``id`` used by the slide and music builders.
    """

    def __init__(self, http: "HttpClient"):
        self._http = http

    def image(self, path: str | Path, source: Optional[str] = None) -> dict[str, Any]:
        """Upload a local image or register a remote one.

        Args:
            path: Local file path, or the image URL when *source* is set.
            source: Provider of a remote image, e.g. ``"hosted"``. Leave
                unset to upload the bytes of a local file.

        Returns:
            The service response; ``id`` holds the new image asset id.

        Raises:
            FileNotFoundError: if *path* is local and does not exist.
        """
        return self._upload(urls.UPLOAD_IMAGE, path, source, "image/jpeg")

    def music(self, path: str | Path, source: Optional[str] = None) -> dict[str, Any]:
        """Upload a local music file or register a remote one.

        Same contract as :meth:`image`; ``id`` holds the music asset id.
        """
        return self._upload(urls.UPLOAD_MUSIC, path, source, "audio/mpeg")

    def _upload(
        self,
        endpoint: str,
        path: str | Path,
        source: Optional[str],
        default_type: str,
    ) -> dict[str, Any]:
        if source:
            logger.debug("registering remote media source=%s url=%s", source, path)
            return self._http.post(endpoint, json={"url": str(path), "source": source})

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Media file not found: {path}")

        guessed, _ = mimetypes.guess_type(str(path))
        content_type = guessed or default_type

        logger.debug("uploading %s (%s) to %s", path.name, content_type, endpoint)
        with open(path, "rb") as f:
            content = f.read()
        return self._http.post(endpoint, files={"file": (path.name, content, content_type)})
