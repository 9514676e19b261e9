"""Responsive image, preload, and video markup builders."""

from .crops import build_sources, join_media_url, order_crops, select_fallback
from .dimensions import PillowDimensionProber
from .picture import PictureMarkupBuilder
from .preload import PreloadLinkBuilder
from .video import VideoMarkupBuilder, calculate_aspect_ratio_padding

__all__ = [
    "PictureMarkupBuilder",
    "PillowDimensionProber",
    "PreloadLinkBuilder",
    "VideoMarkupBuilder",
    "build_sources",
    "calculate_aspect_ratio_padding",
    "join_media_url",
    "order_crops",
    "select_fallback",
]
