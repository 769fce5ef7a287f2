"""In-memory model of a video definition document.

A document is the full description of one video project: the ordered slides
(render order), the credit lines shown at the end, a single background music
track, the style and the rendering quality.  It performs no network I/O; the
:class:`~picovico.VideoSession` owns one document at a time and submits it.

Builder methods never raise.  Each returns ``True`` when the document was
changed and ``False`` when the input was empty or invalid and nothing
happened, so optional fields can be passed straight through::

    doc = VideoDocument()
    doc.append_text_slide("Hi", "Welcome")    # True
    doc.append_text_slide("", "")             # False, no slide added
    doc.set_music("m1")
    payload = doc.normalize_for_save()
"""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Union

logger = logging.getLogger("picovico")

VIDEO_INITIAL = "initial"
VIDEO_PROCESSING = "processing"
VIDEO_PUBLISHED = "published"

STANDARD_SLIDE_DURATION = 5


class Quality(IntEnum):
    """Rendering quality levels (vertical resolution)."""

    Q_360P = 360
    Q_480P = 480
    Q_720P = 720
    Q_1080P = 1080


def _merge_asset(source: dict[str, Any] | None, asset: dict[str, Any]) -> dict[str, Any]:
    """Overlay the modelled fields on a copy of the asset as it was received."""
    merged = copy.deepcopy(source) if source else {}
    merged.pop("start_time", None)
    merged.pop("end_time", None)
    data = merged.get("data") if isinstance(merged.get("data"), dict) else {}
    data.update(asset.pop("data"))
    merged.update(asset)
    merged["data"] = data
    return merged


@dataclass(frozen=True)
class ImageSlide:
    """A slide showing a previously uploaded image."""

    asset_id: str
    caption: str = ""
    source: dict[str, Any] | None = field(default=None, compare=False, repr=False)

    def to_asset(self) -> dict[str, Any]:
        return _merge_asset(
            self.source, {"asset": "image", "asset_id": self.asset_id, "data": {"text": self.caption}}
        )


@dataclass(frozen=True)
class TextSlide:
    """A slide showing a title and/or body text."""

    title: str = ""
    text: str = ""
    source: dict[str, Any] | None = field(default=None, compare=False, repr=False)

    def to_asset(self) -> dict[str, Any]:
        return _merge_asset(self.source, {"asset": "text", "data": {"title": self.title, "text": self.text}})


@dataclass(frozen=True)
class RawSlide:
    """An asset of a kind this SDK does not model, kept as received."""

    payload: dict[str, Any]

    def to_asset(self) -> dict[str, Any]:
        asset = copy.deepcopy(self.payload)
        asset.pop("start_time", None)
        asset.pop("end_time", None)
        return asset


Slide = Union[ImageSlide, TextSlide, RawSlide]


def _coerce_quality(value: Any) -> int | None:
    try:
        quality = int(value)
    except (TypeError, ValueError):
        return None
    try:
        return int(Quality(quality))
    except ValueError:
        return None


@dataclass
class VideoDocument:
    id: str | None = None
    name: str | None = None
    quality: int = Quality.Q_360P
    style: str | None = None
    status: str | None = None
    assets: list[Slide] = field(default_factory=list)
    credit: list[tuple[str, str]] | None = None
    music: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "VideoDocument":
        """Build a document from a server response.

        A music asset found among ``assets`` is lifted out into :attr:`music`
        so that it is written back exactly once on the next save.  Keys this
        model does not know about, at the top level or on a slide, are kept
        and sent back unchanged.
        """
        known = {"id", "name", "quality", "style", "status", "assets", "credit"}
        doc = cls(
            id=data.get("id"),
            name=data.get("name"),
            quality=_coerce_quality(data.get("quality")) or Quality.Q_360P,
            style=data.get("style"),
            status=data.get("status"),
            extra={k: v for k, v in data.items() if k not in known},
        )

        for asset in data.get("assets") or []:
            kind = asset.get("asset")
            payload = asset.get("data") or {}
            if kind == "image" and asset.get("asset_id"):
                doc.assets.append(ImageSlide(asset["asset_id"], payload.get("text") or "", source=asset))
            elif kind == "text":
                doc.assets.append(TextSlide(payload.get("title") or "", payload.get("text") or "", source=asset))
            elif kind == "music":
                doc.music = asset.get("asset_id")
            else:
                doc.assets.append(RawSlide(asset))

        if data.get("credit") is not None:
            doc.credit = [(c[0], c[1]) for c in data["credit"]]
        return doc

    # ------------------------------------------------------------------
    # Builder
    # ------------------------------------------------------------------

    def append_image_slide(self, asset_id: str | None, caption: str | None = "") -> bool:
        if not asset_id:
            return False
        self.assets.append(ImageSlide(asset_id, caption or ""))
        return True

    def append_text_slide(self, title: str | None = "", text: str | None = "") -> bool:
        if not (title or text):
            return False
        self.assets.append(TextSlide(title or "", text or ""))
        return True

    def append_credit_slide(self, title: str | None = None, text: str | None = None) -> bool:
        if not (title or text):
            return False
        if self.credit is None:
            self.credit = []
        self.credit.append((title or "", text or ""))
        return True

    def clear_credits(self) -> bool:
        self.credit = []
        return True

    def clear_assets(self) -> None:
        """Drop every slide and the music track."""
        self.assets = []
        self.music = None

    def set_music(self, asset_id: str | None) -> bool:
        if not asset_id:
            return False
        self.music = asset_id
        return True

    def set_style(self, style: str | None) -> bool:
        if not style:
            return False
        self.style = style
        return True

    def set_quality(self, quality: Any) -> bool:
        coerced = _coerce_quality(quality)
        if coerced is None:
            logger.debug("ignoring unsupported quality %r", quality)
            return False
        self.quality = coerced
        return True

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    @property
    def duration(self) -> int:
        """Length of the slide timeline in seconds."""
        return len(self.assets) * STANDARD_SLIDE_DURATION

    def normalize_for_save(self) -> dict[str, Any]:
        """Return the document in the shape the save endpoint expects.

        Slides are stamped with consecutive ``start_time``/``end_time``
        windows of :data:`STANDARD_SLIDE_DURATION` seconds.  The music
        reference becomes a single music asset placed after the slides and
        spanning the whole timeline.  The document itself is not modified,
        so calling this repeatedly yields the same payload.
        """
        assets: list[dict[str, Any]] = []
        for index, slide in enumerate(self.assets):
            asset = slide.to_asset()
            asset["start_time"] = index * STANDARD_SLIDE_DURATION
            asset["end_time"] = (index + 1) * STANDARD_SLIDE_DURATION
            assets.append(asset)

        if self.music:
            assets.append(
                {
                    "asset": "music",
                    "asset_id": self.music,
                    "start_time": 0,
                    "end_time": self.duration,
                }
            )

        payload: dict[str, Any] = copy.deepcopy(self.extra)
        for key in ("id", "name", "status", "style"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        payload["quality"] = int(self.quality)
        payload["assets"] = assets
        if self.credit is not None:
            payload["credit"] = [[title, text] for title, text in self.credit]
        return payload
