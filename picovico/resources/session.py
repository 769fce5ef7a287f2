from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from .. import urls
from ..document import VIDEO_INITIAL, Quality, VideoDocument, _coerce_quality
from .uploads import HOSTED

if TYPE_CHECKING:
    from .._http import HttpClient
    from .uploads import UploadsResource

logger = logging.getLogger("picovico")


class SessionState(str, Enum):
    UNBOUND = "unbound"
    """No project id; save() and create() do nothing."""
    BOUND = "bound"
    """Bound to an editable (``initial``) project."""
    SUBMITTED = "submitted"
    """create() succeeded; the project is rendering server-side."""


class VideoSession:
    """
    Holds one video project at a time and drives it to rendering.

    Obtain via client.session or client.new_session().

    A session starts *unbound*.  :meth:`begin` or :meth:`open` binds it to a
    remote project and loads that project's document; the ``add_*`` and
    ``set_*`` methods edit the document locally; :meth:`save` persists it and
    :meth:`create` persists it and starts rendering.  Binding a new project
    always discards the previous document.
    """

    def __init__(self, http: "HttpClient", uploads: "UploadsResource"):
        self._http = http
        self._uploads = uploads
        self.video_id: str | None = None
        self.document = VideoDocument()
        self.state = SessionState.UNBOUND

    @property
    def is_bound(self) -> bool:
        return self.video_id is not None

    def _reset(self) -> None:
        self.video_id = None
        self.document = VideoDocument()
        self.state = SessionState.UNBOUND

    def _bind(self, video_id: str, document: VideoDocument) -> None:
        self.video_id = video_id
        self.document = document
        self.state = SessionState.BOUND

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def begin(self, name: str, quality: int = Quality.Q_360P) -> Optional[str]:
        """Start a new, empty project.

        The service allocates the project and returns a skeleton document.
        Any assets in that skeleton are dropped; use :meth:`open` to keep
        working on an existing project.

        Args:
            name: Human-readable project name.
            quality: Rendering quality, one of :class:`Quality`. Defaults
                to 360p; unsupported values fall back to 360p.

        Returns:
            The bound project id, or ``None`` when the service did not
            allocate one.
        """
        self._reset()
        quality = _coerce_quality(quality) or Quality.Q_360P
        response = self._http.post(urls.BEGIN_PROJECT, json={"name": name, "quality": quality})
        video_id = (response or {}).get("id")
        if not video_id:
            logger.debug("begin name=%r returned no project id", name)
            return None

        document = VideoDocument.from_payload(response)
        document.clear_assets()
        if document.name is None:
            document.name = name
        document.set_quality(quality)

        self._bind(video_id, document)
        logger.debug("began project video=%s name=%r quality=%s", video_id, name, document.quality)
        return self.video_id

    def open(self, video_id: Optional[str]) -> Optional[str]:
        """Load an existing project for editing.

        Only projects that have not been rendered (status ``initial``) can
        be opened.  For any other status the session stays unbound and
        ``None`` is returned; fetch such videos with
        :meth:`Picovico.get_video <picovico.Picovico.get_video>` instead.

        Returns:
            The bound project id, or ``None``.
        """
        self._reset()
        if not video_id:
            return None

        data = self._http.get(urls.SINGLE_VIDEO.format(video_id=video_id))
        status = (data or {}).get("status")
        if status != VIDEO_INITIAL:
            logger.info("video=%s has status=%s and cannot be edited", video_id, status)
            return None

        self._bind(video_id, VideoDocument.from_payload(data))
        logger.debug("opened project video=%s with %d slides", video_id, len(self.document.assets))
        return self.video_id

    def save(self) -> Optional[dict[str, Any]]:
        """Persist the current document.

        Returns:
            The service response, or ``None`` when no project is bound.
        """
        if not self.is_bound:
            logger.debug("save skipped, no project bound")
            return None
        payload = self.document.normalize_for_save()
        logger.debug("saving video=%s slides=%d", self.video_id, len(self.document.assets))
        return self._http.post(urls.SAVE_VIDEO.format(video_id=self.video_id), json=payload)

    def create(self) -> Optional[dict[str, Any]]:
        """Save the document, then queue the project for rendering.

        Returns:
            The render response, or ``None`` when no project is bound (no
            request is sent in that case).
        """
        if not self.is_bound:
            logger.debug("create skipped, no project bound")
            return None
        self.save()
        response = self._http.post(urls.CREATE_VIDEO.format(video_id=self.video_id))
        self.state = SessionState.SUBMITTED
        logger.debug("render queued video=%s", self.video_id)
        return response

    # ------------------------------------------------------------------
    # Slides
    # ------------------------------------------------------------------

    def add_image(self, path: str | Path, caption: str = "", source: Optional[str] = HOSTED) -> bool:
        """Upload an image and append it as a slide.

        With the default ``source="hosted"`` *path* is a URL that the
        service fetches itself.  Pass ``source=None`` to upload a local
        file.
        """
        response = self._uploads.image(path, source)
        return self.add_library_image((response or {}).get("id"), caption)

    def add_library_image(self, image_id: Optional[str], caption: str = "") -> bool:
        """Append a previously uploaded image as a slide."""
        return self.document.append_image_slide(image_id, caption)

    def add_text(self, title: str = "", text: str = "") -> bool:
        return self.document.append_text_slide(title, text)

    def add_credits(self, title: Optional[str] = None, text: Optional[str] = None) -> bool:
        return self.document.append_credit_slide(title, text)

    def remove_credits(self) -> bool:
        return self.document.clear_credits()

    # ------------------------------------------------------------------
    # Music, style, quality
    # ------------------------------------------------------------------

    def add_music(self, path: str | Path, source: Optional[str] = None) -> bool:
        """Upload a music file and use it as the background track."""
        response = self._uploads.music(path, source)
        return self.add_library_music((response or {}).get("id"))

    def add_library_music(self, music_id: Optional[str]) -> bool:
        """Use uploaded or library music as the background track.

        There is one track per video; a later call replaces the earlier one.
        """
        return self.document.set_music(music_id)

    def set_style(self, style: str) -> bool:
        return self.document.set_style(style)

    def set_quality(self, quality: Any) -> bool:
        return self.document.set_quality(quality)

    def __repr__(self) -> str:
        return f"<VideoSession video_id={self.video_id!r} state={self.state.value}>"
