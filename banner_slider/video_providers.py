"""Video provider registry and the built-in provider for locally stored files.

Remote hosts (YouTube, Vimeo, ...) are registered by the embedding
application; only plain media files are handled here.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import PurePosixPath

from .media.crops import join_media_url

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .interfaces import VideoProvider

LOCAL_VIDEO_EXTENSIONS = frozenset({".mp4", ".webm", ".ogg", ".mov"})


@dc.dataclass(slots=True, frozen=True)
class LocalVideoData:
    """A media-relative video file path."""

    path: str


class LocalVideoProvider:
    """Serve video files stored in the media directory."""

    code = "local"

    def __init__(self, media_url: str) -> None:
        self.media_url = media_url

    def matches(self, reference: str) -> bool:
        """Return ``True`` when ``reference`` names a playable video file."""
        if "://" in reference:
            return False
        return PurePosixPath(reference).suffix.lower() in LOCAL_VIDEO_EXTENSIONS

    def parse(self, reference: str) -> LocalVideoData:
        """Return the video data for ``reference``; raise ``ValueError`` otherwise."""
        if not self.matches(reference):
            msg = f"'{reference}' is not a local video file."
            raise ValueError(msg)
        return LocalVideoData(path=reference)

    def get_embed_url(self, video_data: object) -> str:
        """Return the public URL of the video file."""
        if not isinstance(video_data, LocalVideoData):
            msg = "LocalVideoProvider can only embed LocalVideoData."
            raise TypeError(msg)
        return join_media_url(self.media_url, video_data.path)

    def get_embed_attributes(self) -> dict[str, str]:
        """Return default ``<video>`` attributes."""
        return {"controls": "controls", "preload": "metadata"}

    def is_local(self) -> bool:
        """Local files render as native video elements."""
        return True


class VideoProviderRegistry:
    """Resolve a reference to the first registered provider that matches it."""

    def __init__(self, providers: cabc.Iterable[VideoProvider] = ()) -> None:
        self._providers = list(providers)

    def register(self, provider: VideoProvider) -> None:
        """Append ``provider`` to the lookup order."""
        self._providers.append(provider)

    def resolve(self, reference: str) -> VideoProvider | None:
        """Return the provider for ``reference`` or ``None``."""
        return next(
            (provider for provider in self._providers if provider.matches(reference)),
            None,
        )


__all__ = [
    "LOCAL_VIDEO_EXTENSIONS",
    "LocalVideoData",
    "LocalVideoProvider",
    "VideoProviderRegistry",
]
