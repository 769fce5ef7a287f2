"""Picovico Python SDK
====================

The Picovico SDK builds slideshow videos on the Picovico service from
Python.  A video project goes through four steps:

1. **Login**: exchange a username and password for access tokens, or
   reuse saved tokens.
2. **Begin / open**: start an empty project, or reopen one that has not
   been rendered yet.
3. **Define**: append image and text slides, pick a background track, a
   style and a rendering quality, add credits.  All of this happens
   locally on a :class:`VideoDocument`.
4. **Save / create**: send the document to the service, then queue it
   for rendering.

Quick start::

    from picovico import Picovico, Quality

    with Picovico() as client:
        client.login("me@example.com", "secret")

        video = client.session
        video.begin("My Video", quality=Quality.Q_720P)
        video.add_text("Hi", "Welcome")
        video.add_image("https://example.com/beach.jpg", caption="Beach")
        video.add_library_music("m1")
        video.set_style(client.get_styles()[0]["machine_name"])
        video.add_credits("Music", "Someone")

        video.create()

Main classes
------------

:class:`Picovico`
    The top-level API client.  Holds the login tokens and one active
    :class:`VideoSession`.  Can be used as a context manager.

:class:`VideoSession` (``client.session``)
    The project being edited.  ``begin``/``open`` bind a project,
    ``save``/``create`` submit it.  Both return ``None`` while no project
    is bound; check :attr:`VideoSession.state` for the current state.

:class:`VideoDocument` (``client.session.document``)
    The video definition itself: ordered slides, credits, music, style and
    quality.  Builder methods return ``True`` when they changed the
    document and ``False`` for empty input.

:class:`UploadsResource` (``client.uploads``)
    Uploads local media or registers remote media and returns its id.

Exceptions
----------

All SDK exceptions inherit from :class:`PicovicoError`.

:class:`AuthenticationError`
    Missing, invalid or expired login tokens.

:class:`NotLoggedInError`
    A request that needs login was attempted before any tokens were set.
    Subclass of :class:`AuthenticationError`; no request is sent.

:class:`NotFoundError`
    The requested resource does not exist (404).

Network failures surface as the underlying ``httpx`` exceptions.
"""

from .client import API_SERVER, API_VERSION, VERSION, Picovico
from .document import (
    STANDARD_SLIDE_DURATION,
    VIDEO_INITIAL,
    VIDEO_PROCESSING,
    VIDEO_PUBLISHED,
    ImageSlide,
    Quality,
    TextSlide,
    VideoDocument,
)
from .exceptions import AuthenticationError, NotFoundError, NotLoggedInError, PicovicoError
from .resources import SessionState, UploadsResource, VideoSession

__version__ = VERSION
__all__ = [
    "Picovico",
    "VideoSession",
    "SessionState",
    "UploadsResource",
    "VideoDocument",
    "ImageSlide",
    "TextSlide",
    "Quality",
    "VIDEO_INITIAL",
    "VIDEO_PROCESSING",
    "VIDEO_PUBLISHED",
    "STANDARD_SLIDE_DURATION",
    "API_SERVER",
    "API_VERSION",
    "VERSION",
    "PicovicoError",
    "AuthenticationError",
    "NotLoggedInError",
    "NotFoundError",
]
