"""Order responsive crops and derive the ``<source>`` list for a banner.

Crops are evaluated desktop first: the smallest ``sort_order`` has the highest
priority. For every crop that has a cropped image, the eligible formats are
emitted in a fixed order (AVIF, WebP, original) so that user agents pick the
best format they can decode for the first matching media query.
"""

from __future__ import annotations

import typing as typ

from banner_slider._constants import DEFAULT_MEDIA_QUERY, MIME_AVIF, MIME_WEBP
from banner_slider.models import SourceDescriptor

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from banner_slider.models import ResponsiveCrop


def join_media_url(media_url: str, path: str) -> str:
    """Join the media base URL and a media-relative path with a single slash."""
    return f"{media_url.rstrip('/')}/{path.lstrip('/')}"


def order_crops(crops: cabc.Iterable[ResponsiveCrop]) -> list[ResponsiveCrop]:
    """Return ``crops`` sorted by ascending sort order; ties keep input order."""
    return sorted(crops, key=lambda crop: crop.sort_order or 0)


def media_query_for(crop: ResponsiveCrop) -> str:
    """Return the crop's breakpoint media query or the catch-all default."""
    return crop.media_query or DEFAULT_MEDIA_QUERY


def avif_path(crop: ResponsiveCrop) -> str | None:
    """Return the AVIF variant path when generation is enabled and a file exists."""
    if crop.generate_avif and crop.avif_image:
        return crop.avif_image
    return None


def webp_path(crop: ResponsiveCrop) -> str | None:
    """Return the WebP variant path when generation is enabled and a file exists."""
    if crop.generate_webp and crop.webp_image:
        return crop.webp_image
    return None


def renderable_crops(crops: cabc.Iterable[ResponsiveCrop]) -> list[ResponsiveCrop]:
    """Return crops in priority order, skipping those without a cropped image."""
    return [crop for crop in order_crops(crops) if crop.cropped_image]


def select_fallback(crops: cabc.Iterable[ResponsiveCrop]) -> ResponsiveCrop | None:
    """Return the highest-priority crop able to back the fallback ``<img>``."""
    return next(iter(renderable_crops(crops)), None)


def build_sources(
    crops: cabc.Iterable[ResponsiveCrop], media_url: str
) -> list[SourceDescriptor]:
    """Return the ordered ``<source>`` descriptors for ``crops``.

    Parameters
    ----------
    crops : Iterable[ResponsiveCrop]
        Crops of a single banner in any order.
    media_url : str
        Base URL the crop paths are relative to.

    Returns
    -------
    list[SourceDescriptor]
        Per crop, in priority order: AVIF (typed), WebP (typed), original.
    """
    sources: list[SourceDescriptor] = []
    for crop in renderable_crops(crops):
        media = media_query_for(crop)
        avif = avif_path(crop)
        if avif:
            sources.append(
                SourceDescriptor(media, join_media_url(media_url, avif), MIME_AVIF)
            )
        webp = webp_path(crop)
        if webp:
            sources.append(
                SourceDescriptor(media, join_media_url(media_url, webp), MIME_WEBP)
            )
        sources.append(
            SourceDescriptor(media, join_media_url(media_url, crop.cropped_image or ""))
        )
    return sources


__all__ = [
    "avif_path",
    "build_sources",
    "join_media_url",
    "media_query_for",
    "order_crops",
    "renderable_crops",
    "select_fallback",
    "webp_path",
]
