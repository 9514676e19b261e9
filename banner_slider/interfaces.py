"""Collaborator contracts consumed by the banner renderer.

Storage, video provider resolution, image probing, and content filtering live
outside the rendering core. They are described here as structural protocols so
hosts can plug in their own implementations without subclassing.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Banner, ResponsiveCrop, Slider


class ResponsiveCropRepository(typ.Protocol):
    """Lookup of responsive crops by banner id; either call may raise."""

    def get_by_banner_id(self, banner_id: int) -> list[ResponsiveCrop]: ...

    def get_by_banner_ids(
        self, banner_ids: cabc.Sequence[int]
    ) -> dict[int, list[ResponsiveCrop]]: ...


class SliderLocator(typ.Protocol):
    """Resolve a slider visible to the current request."""

    def get_by_id(self, slider_id: int) -> Slider | None: ...


class BannerSource(typ.Protocol):
    """Return active, in-date banners of a slider ordered by position."""

    def get_active_banners(self, slider_id: int) -> list[Banner]: ...


class VideoProvider(typ.Protocol):
    """A video hosting backend able to turn a reference into embed markup data.

    ``parse`` raises :class:`ValueError` when the reference is not understood.
    """

    @property
    def code(self) -> str: ...

    def matches(self, reference: str) -> bool: ...

    def parse(self, reference: str) -> object: ...

    def get_embed_url(self, video_data: object) -> str: ...

    def get_embed_attributes(self) -> dict[str, str]: ...

    def is_local(self) -> bool: ...


class VideoProviderResolver(typ.Protocol):
    """Pick the provider responsible for a video reference, if any."""

    def resolve(self, reference: str) -> VideoProvider | None: ...


class DimensionProber(typ.Protocol):
    """Return ``(width, height)`` for a media-relative path, or ``None``."""

    def probe(self, path: str) -> tuple[int, int] | None: ...


class ContentFilter(typ.Protocol):
    """Expand template directives embedded in custom HTML content."""

    def filter(self, content: str) -> str: ...


__all__ = [
    "BannerSource",
    "ContentFilter",
    "DimensionProber",
    "ResponsiveCropRepository",
    "SliderLocator",
    "VideoProvider",
    "VideoProviderResolver",
]
