"""Typed dataclasses describing sliders, banners, and responsive crops.

Records are read-only views for the duration of one render pass. They are
usually produced by :func:`banner_slider.config.load_catalog`, but any storage
layer can build them directly.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import enum
import typing as typ

AttributeValue = str | bool | int
AttributeMap = dict[str, AttributeValue]


class BannerType(enum.StrEnum):
    """Kinds of content a banner can carry."""

    IMAGE = "image"
    VIDEO = "video"
    CUSTOM = "custom"


@dc.dataclass(slots=True, frozen=True)
class Slider:
    """Display and behaviour configuration of one carousel instance.

    Attributes
    ----------
    slider_id : int
        Storage identifier of the slider.
    name : str
        Admin-facing label.
    effect : str
        Transition effect, ``"slide"`` or ``"fade"``.
    autoplay_timeout : int
        Autoplay interval in milliseconds.
    responsive_items : str | Mapping | None
        Legacy per-breakpoint settings keyed by viewport width, either as a
        JSON string or an already decoded mapping.
    """

    slider_id: int
    name: str = ""
    effect: str = "slide"
    loop_enabled: bool = False
    autoplay_enabled: bool = False
    autoplay_timeout: int = 5000
    navigation_enabled: bool = True
    pagination_enabled: bool = True
    lazy_load_enabled: bool = False
    auto_width_enabled: bool = False
    auto_height_enabled: bool = False
    responsive_enabled: bool = False
    responsive_items: str | typ.Mapping[str, typ.Any] | None = None


@dc.dataclass(slots=True, frozen=True)
class Banner:
    """One slide's content and display flags."""

    banner_id: int
    slider_id: int
    name: str = ""
    banner_type: BannerType = BannerType.IMAGE
    title: str | None = None
    image: str | None = None
    video_url: str | None = None
    video_path: str | None = None
    link_url: str | None = None
    content: str | None = None
    open_in_new_tab: bool = False
    preload_enabled: bool = False
    video_as_background: bool = False
    video_aspect_ratio: str | None = None
    is_active: bool = True
    position: int = 0
    active_from: dt.date | None = None
    active_to: dt.date | None = None


@dc.dataclass(slots=True, frozen=True)
class ResponsiveCrop:
    """Breakpoint-specific image variant of a banner image.

    ``target_width``, ``target_height`` and ``media_query`` come from the
    breakpoint joined to the crop and may be missing.
    """

    crop_id: int
    banner_id: int
    cropped_image: str | None = None
    webp_image: str | None = None
    avif_image: str | None = None
    generate_webp: bool = False
    generate_avif: bool = False
    sort_order: int | None = None
    target_width: int | None = None
    target_height: int | None = None
    media_query: str | None = None


@dc.dataclass(slots=True, frozen=True)
class SourceDescriptor:
    """A single ``<source>`` entry of a ``<picture>`` element."""

    media: str
    srcset: str
    type: str | None = None

    def attributes(self) -> AttributeMap:
        """Return the HTML attributes for the ``<source>`` tag."""
        attrs: AttributeMap = {"media": self.media, "srcset": self.srcset}
        if self.type is not None:
            attrs["type"] = self.type
        return attrs


@dc.dataclass(slots=True, frozen=True)
class PreloadLink:
    """An image preload hint emitted into the page head."""

    href: str
    rel: str = "preload"
    as_: str = "image"
    type: str | None = None
    imagesrcset: str | None = None
    imagesizes: str | None = None

    def attributes(self) -> AttributeMap:
        """Return the ``<link>`` attributes, omitting unset optional fields."""
        attrs: AttributeMap = {"rel": self.rel, "as": self.as_, "href": self.href}
        if self.type is not None:
            attrs["type"] = self.type
        if self.imagesrcset is not None:
            attrs["imagesrcset"] = self.imagesrcset
        if self.imagesizes is not None:
            attrs["imagesizes"] = self.imagesizes
        return attrs


__all__ = [
    "AttributeMap",
    "AttributeValue",
    "Banner",
    "BannerType",
    "PreloadLink",
    "ResponsiveCrop",
    "Slider",
    "SourceDescriptor",
]
