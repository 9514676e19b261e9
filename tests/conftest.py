"""Shared fixtures for the banner slider test suite.

The renderer talks to storage, video providers, and the filesystem through
small protocols. The recording fakes from ``fakes.py`` let tests assert on
caching behaviour without a database or real video hosts.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import pytest

from banner_slider.attributes import ElementAttributePool
from banner_slider.models import ResponsiveCrop
from banner_slider.renderer import BannerRenderer
from fakes import FakeCropRepository, FakeResolver

MEDIA_URL = "https://cdn.example/media/"


@pytest.fixture
def crop_repository() -> FakeCropRepository:
    """Return an empty recording crop repository."""
    return FakeCropRepository()


@pytest.fixture
def make_renderer(
    crop_repository: FakeCropRepository,
) -> cabc.Callable[..., BannerRenderer]:
    """Return a factory building renderers around the shared fakes."""

    def _factory(**overrides: typ.Any) -> BannerRenderer:
        options: dict[str, typ.Any] = {
            "media_url": MEDIA_URL,
            "crop_repository": crop_repository,
            "video_resolver": FakeResolver(),
            "attribute_pool": ElementAttributePool(),
        }
        options.update(overrides)
        return BannerRenderer(**options)

    return _factory


@pytest.fixture
def desktop_mobile_crops() -> list[ResponsiveCrop]:
    """Return a desktop crop (AVIF + WebP) and a mobile crop (WebP only).

    The mobile crop is listed first to prove ordering by ``sort_order``.
    """
    return [
        ResponsiveCrop(
            crop_id=2,
            banner_id=7,
            cropped_image="crops/hero-600.jpg",
            webp_image="crops/hero-600.webp",
            avif_image="crops/hero-600.avif",
            generate_webp=True,
            generate_avif=False,
            sort_order=1,
            target_width=600,
            target_height=600,
            media_query="(min-width: 0px)",
        ),
        ResponsiveCrop(
            crop_id=1,
            banner_id=7,
            cropped_image="crops/hero-1200.jpg",
            webp_image="crops/hero-1200.webp",
            avif_image="crops/hero-1200.avif",
            generate_webp=True,
            generate_avif=True,
            sort_order=0,
            target_width=1200,
            target_height=500,
            media_query="(min-width: 1024px)",
        ),
    ]
