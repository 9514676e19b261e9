"""Build image preload hints for banners rendered above the fold.

Only one hint is emitted per banner, for the most preferred format available
(AVIF, then WebP, then the original). Typed hints are skipped by user agents
that cannot decode the format, so a single hint never triggers redundant
downloads.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from banner_slider._constants import DEFAULT_SIZES_DESCRIPTOR, MIME_AVIF, MIME_WEBP
from banner_slider.models import PreloadLink

from .crops import avif_path, join_media_url, renderable_crops, webp_path

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from banner_slider.models import ResponsiveCrop


@dc.dataclass(slots=True)
class _FormatSrcset:
    mime_type: str | None
    candidates: list[str] = dc.field(default_factory=list)

    @property
    def href(self) -> str:
        return self.candidates[0].split(" ", 1)[0]


class PreloadLinkBuilder:
    """Aggregate crop URLs into a single responsive preload link."""

    def __init__(self, media_url: str) -> None:
        self.media_url = media_url

    def build_responsive(
        self, crops: cabc.Sequence[ResponsiveCrop]
    ) -> list[PreloadLink]:
        """Return at most one preload link covering every crop breakpoint."""
        avif = _FormatSrcset(MIME_AVIF)
        webp = _FormatSrcset(MIME_WEBP)
        original = _FormatSrcset(None)
        sizes: list[str] = []

        for crop in renderable_crops(crops):
            width = crop.target_width or 0
            if crop.media_query and width:
                sizes.append(f"{crop.media_query} {width}px")
            original.candidates.append(self._candidate(crop.cropped_image or "", width))
            if path := avif_path(crop):
                avif.candidates.append(self._candidate(path, width))
            if path := webp_path(crop):
                webp.candidates.append(self._candidate(path, width))

        sizes_value = ", ".join([*sizes, DEFAULT_SIZES_DESCRIPTOR])
        for chosen in (avif, webp, original):
            if chosen.candidates:
                return [
                    PreloadLink(
                        href=chosen.href,
                        type=chosen.mime_type,
                        imagesrcset=", ".join(chosen.candidates),
                        imagesizes=sizes_value,
                    )
                ]
        return []

    @staticmethod
    def build_plain(image_url: str | None) -> list[PreloadLink]:
        """Return a generic preload link for a single image, if there is one."""
        if not image_url:
            return []
        return [PreloadLink(href=image_url)]

    def _candidate(self, path: str, width: int) -> str:
        return f"{join_media_url(self.media_url, path)} {width}w"


__all__ = ["PreloadLinkBuilder"]
