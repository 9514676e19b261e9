"""Built-in attribute providers registered by the default composition."""

from __future__ import annotations

import typing as typ

from banner_slider.models import BannerType

from .provider import ElementAttributeProvider

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from banner_slider.models import AttributeMap, Banner, Slider


class SliderDataAttributeProvider(ElementAttributeProvider):
    """Expose slider and banner identifiers plus modifier classes."""

    sort_order = 10

    def get_container_attributes(
        self, slider: Slider, banners: cabc.Sequence[Banner]
    ) -> AttributeMap:
        return {
            "data-slider-id": slider.slider_id,
            "class": f"banner-slider--{slider.effect or 'slide'}",
        }

    def get_slide_attributes(self, slider: Slider, banner: Banner) -> AttributeMap:
        return {
            "data-banner-id": banner.banner_id,
            "class": f"banner-slider__slide--{banner.banner_type.value}",
        }


class BackgroundVideoAttributeProvider(ElementAttributeProvider):
    """Flag slides whose video plays as a background layer."""

    sort_order = 20

    def get_slide_attributes(self, slider: Slider, banner: Banner) -> AttributeMap:
        if banner.banner_type is not BannerType.VIDEO or not banner.video_as_background:
            return {}
        return {"class": "banner-slider__slide--video-background"}


class LinkTrackingAttributeProvider(ElementAttributeProvider):
    """Annotate banner links so click tracking can identify the slide."""

    sort_order = 30

    def get_link_attributes(self, slider: Slider, banner: Banner) -> AttributeMap:
        if not banner.link_url:
            return {}
        return {
            "data-banner-id": banner.banner_id,
            "data-banner-position": banner.position,
        }


def default_providers() -> list[ElementAttributeProvider]:
    """Return fresh instances of the built-in providers."""
    return [
        SliderDataAttributeProvider(),
        BackgroundVideoAttributeProvider(),
        LinkTrackingAttributeProvider(),
    ]


__all__ = [
    "BackgroundVideoAttributeProvider",
    "LinkTrackingAttributeProvider",
    "SliderDataAttributeProvider",
    "default_providers",
]
