"""Render video banners as native ``<video>`` elements or embedded frames.

Local files play through a ``<video>`` element; remote providers are embedded
with an ``<iframe>``. Both are wrapped in a container whose bottom padding
reserves the video's intrinsic aspect ratio. Background videos are forced into
muted, looping autoplay and may carry an overlay with the banner's HTML
content.
"""

from __future__ import annotations

import re
import typing as typ
from urllib.parse import urlencode

from banner_slider._constants import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_PADDING_BOTTOM,
    IFRAME_FILL_STYLE,
    OVERLAY_STYLE,
    VIDEO_BACKGROUND_CLASS,
    VIDEO_FALLBACK_TEXT,
    VIDEO_FILL_STYLE,
    VIDEO_OVERLAY_CLASS,
    VIDEO_WRAPPER_CLASS,
)
from banner_slider._logging import get_logger

from .markup import tag

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from banner_slider.interfaces import VideoProvider, VideoProviderResolver
    from banner_slider.models import AttributeMap, Banner

logger = get_logger(__name__)

YOUTUBE_EMBED_PATTERN = re.compile(r"/embed/([a-zA-Z0-9_-]+)")
BACKGROUND_FLAGS = ("autoplay", "loop", "muted", "playsinline")


def calculate_aspect_ratio_padding(aspect_ratio: str) -> float:
    """Return the padding-bottom percentage for a ``"W:H"`` aspect ratio.

    Malformed ratios and non-positive widths fall back to 16:9.

    Examples
    --------
    >>> calculate_aspect_ratio_padding("4:3")
    75.0
    >>> calculate_aspect_ratio_padding("4")
    56.25
    """
    parts = aspect_ratio.split(":")
    if len(parts) != 2:  # noqa: PLR2004 - width and height
        return DEFAULT_PADDING_BOTTOM
    try:
        width = float(parts[0])
        height = float(parts[1])
    except ValueError:
        return DEFAULT_PADDING_BOTTOM
    if width <= 0:
        return DEFAULT_PADDING_BOTTOM
    return round(height / width * 100, 2)


def extract_youtube_video_id(url: str) -> str:
    """Return the video id from a YouTube ``/embed/<id>`` URL, or ``""``."""
    match = YOUTUBE_EMBED_PATTERN.search(url)
    return match.group(1) if match else ""


def background_embed_url(url: str, provider_code: str) -> str:
    """Append provider-specific background playback parameters to ``url``."""
    params: dict[str, str]
    match provider_code:
        case "youtube":
            # loop only works on YouTube when the video is its own playlist
            params = {
                "autoplay": "1",
                "mute": "1",
                "loop": "1",
                "controls": "0",
                "showinfo": "0",
                "rel": "0",
                "modestbranding": "1",
                "playlist": extract_youtube_video_id(url),
            }
        case "vimeo":
            params = {"autoplay": "1", "muted": "1", "loop": "1", "background": "1"}
        case _:
            return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(params)}"


def _format_padding(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


class VideoMarkupBuilder:
    """Resolve a banner's video reference and render responsive video markup."""

    def __init__(
        self,
        resolver: VideoProviderResolver,
        content_filter: cabc.Callable[[str | None], str],
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        resolver : VideoProviderResolver
            Collaborator mapping a video reference to its provider.
        content_filter : Callable[[str | None], str]
            Expands directives in overlay content; must not raise.
        """
        self.resolver = resolver
        self.content_filter = content_filter

    @staticmethod
    def video_reference(banner: Banner) -> str | None:
        """Return the local video path when set, else the external video URL."""
        return banner.video_path or banner.video_url or None

    def get_provider(self, banner: Banner) -> VideoProvider | None:
        """Return the provider responsible for the banner's video, if any."""
        reference = self.video_reference(banner)
        if not reference:
            return None
        return self.resolver.resolve(reference)

    def get_video_data(self, banner: Banner) -> object | None:
        """Return parsed video data, or ``None`` when the reference is unusable."""
        provider = self.get_provider(banner)
        reference = self.video_reference(banner)
        if provider is None or not reference:
            return None
        try:
            return provider.parse(reference)
        except ValueError as exc:
            logger.debug(
                "Unparseable video reference for banner %s: %s", banner.banner_id, exc
            )
            return None

    def render(self, banner: Banner) -> str:
        """Return the wrapped video markup for ``banner`` or ``""``."""
        provider = self.get_provider(banner)
        video_data = self.get_video_data(banner)
        if provider is None or video_data is None:
            return ""

        embed_url = provider.get_embed_url(video_data)
        attributes: AttributeMap = dict(provider.get_embed_attributes())
        aspect_ratio = banner.video_aspect_ratio or DEFAULT_ASPECT_RATIO
        background = banner.video_as_background
        overlay_content = banner.content if background else None

        if provider.is_local():
            return self.render_local(
                embed_url,
                attributes,
                aspect_ratio,
                background=background,
                overlay_content=overlay_content,
            )
        if background:
            embed_url = background_embed_url(embed_url, provider.code)
        return self.render_iframe(
            embed_url,
            attributes,
            aspect_ratio,
            background=background,
            overlay_content=overlay_content,
        )

    def render_local(
        self,
        url: str,
        attributes: cabc.Mapping[str, str | bool | int],
        aspect_ratio: str,
        *,
        background: bool = False,
        overlay_content: str | None = None,
    ) -> str:
        """Render a native ``<video>`` element filling its wrapper."""
        video_attributes: AttributeMap = dict(attributes)
        if background:
            for flag in BACKGROUND_FLAGS:
                video_attributes[flag] = flag
            video_attributes.pop("controls", None)
        video_attributes["src"] = url
        video_attributes["style"] = VIDEO_FILL_STYLE
        video_html = tag("video", VIDEO_FALLBACK_TEXT, video_attributes)
        return self._wrap(
            video_html,
            aspect_ratio,
            background=background,
            overlay_content=overlay_content,
        )

    def render_iframe(
        self,
        url: str,
        attributes: cabc.Mapping[str, str | bool | int],
        aspect_ratio: str,
        *,
        background: bool = False,
        overlay_content: str | None = None,
    ) -> str:
        """Render an embedding ``<iframe>`` filling its wrapper."""
        frame_attributes: AttributeMap = dict(attributes)
        frame_attributes["src"] = url
        frame_attributes["style"] = IFRAME_FILL_STYLE
        iframe_html = tag("iframe", "", frame_attributes)
        return self._wrap(
            iframe_html,
            aspect_ratio,
            background=background,
            overlay_content=overlay_content,
        )

    def _wrap(
        self,
        inner_html: str,
        aspect_ratio: str,
        *,
        background: bool,
        overlay_content: str | None,
    ) -> str:
        padding = _format_padding(calculate_aspect_ratio_padding(aspect_ratio))
        wrapper_class = VIDEO_WRAPPER_CLASS
        if background:
            wrapper_class = f"{wrapper_class} {VIDEO_BACKGROUND_CLASS}"

        overlay = ""
        if background and overlay_content:
            overlay = tag(
                "div",
                self.content_filter(overlay_content),
                {"class": VIDEO_OVERLAY_CLASS, "style": OVERLAY_STYLE},
            )
        return tag(
            "div",
            inner_html + overlay,
            {
                "class": wrapper_class,
                "style": f"position:relative;padding-bottom:{padding}%;",
            },
        )


__all__ = [
    "VideoMarkupBuilder",
    "background_embed_url",
    "calculate_aspect_ratio_padding",
    "extract_youtube_video_id",
]
