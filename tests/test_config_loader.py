"""Tests for loading the slider catalog from YAML."""

from __future__ import annotations

import datetime as dt
import textwrap
import typing as typ
from pathlib import Path

import pytest

from banner_slider.config import (
    CatalogConfigError,
    CatalogDefaults,
    SliderCatalog,
    load_catalog,
)
from banner_slider.models import BannerType

if typ.TYPE_CHECKING:
    import collections.abc as cabc

CATALOG_YAML = """\
defaults:
  media_url: https://cdn.example/media/
  media_dir: media
  output: out/home.html
sliders:
  home-hero:
    id: 3
    effect: fade
    loop: true
    autoplay: true
    autoplay_timeout: "7000"
    responsive: true
    responsive_items: '{"768": {"items": 2}}'
    banners:
      - id: 30
        title: First
        image: banner/first.jpg
        preload: true
        crops:
          - cropped_image: crops/first-1200.jpg
            avif_image: crops/first-1200.avif
            generate_avif: true
            target_width: 1200
            target_height: 500
            media_query: "(min-width: 1024px)"
          - id: 99
            cropped_image: crops/first-600.jpg
            sort_order: 1
      - id: "31"
        type: video
        video_path: video/a.mp4
        video_as_background: true
        video_aspect_ratio: "4:3"
        position: 5
      - id: 32
        type: custom
        content: <p>Hi</p>
        active_from: 2030-01-01
"""


@pytest.fixture
def write_catalog(tmp_path: Path) -> cabc.Callable[[str], Path]:
    """Return a helper writing YAML text into a temporary catalog file."""

    def _write(text: str) -> Path:
        path = tmp_path / "sliders.yaml"
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write


def test_load_catalog_builds_typed_records(
    write_catalog: cabc.Callable[[str], Path],
) -> None:
    """Sliders, banners, and crops are parsed with defaults applied."""
    catalog = load_catalog(write_catalog(CATALOG_YAML))

    assert catalog.defaults.media_url == "https://cdn.example/media/"
    assert catalog.defaults.media_dir == Path("media")
    assert catalog.defaults.output == Path("out/home.html")

    slider = catalog.get_slider("home-hero")
    assert slider.slider_id == 3
    assert slider.name == "Home Hero", "name should default from the key"
    assert slider.effect == "fade"
    assert slider.loop_enabled
    assert slider.autoplay_timeout == 7000
    assert slider.navigation_enabled, "navigation defaults to enabled"
    assert slider.responsive_items == '{"768": {"items": 2}}'

    first, video, custom = catalog.banners[3]
    assert first.banner_type is BannerType.IMAGE
    assert first.position == 0, "position defaults to the declaration index"
    assert first.preload_enabled
    assert video.banner_id == 31
    assert video.banner_type is BannerType.VIDEO
    assert video.position == 5
    assert video.video_aspect_ratio == "4:3"
    assert custom.active_from == dt.date(2030, 1, 1)

    crops = catalog.get_by_banner_id(30)
    assert [crop.crop_id for crop in crops] == [1, 99]
    assert crops[0].generate_avif
    assert crops[0].target_width == 1200
    assert crops[1].sort_order == 1
    assert catalog.get_by_banner_id(31) == []


def test_catalog_serves_active_banners_in_position_order(
    write_catalog: cabc.Callable[[str], Path],
) -> None:
    """Inactive and out-of-window banners are filtered, the rest sorted."""
    catalog = load_catalog(write_catalog(CATALOG_YAML))
    catalog.today = dt.date(2025, 6, 1)
    assert [banner.banner_id for banner in catalog.get_active_banners(3)] == [30, 31]

    catalog.today = dt.date(2030, 6, 1)
    assert [banner.banner_id for banner in catalog.get_active_banners(3)] == [
        30,
        32,
        31,
    ], "banner 32 becomes active and sorts by its index position"
    assert catalog.get_active_banners(404) == []


def test_catalog_batch_lookup_skips_banners_without_crops(
    write_catalog: cabc.Callable[[str], Path],
) -> None:
    """Batch crop lookups only return ids that have crops."""
    catalog = load_catalog(write_catalog(CATALOG_YAML))
    grouped = catalog.get_by_banner_ids([30, 31, 500])
    assert list(grouped) == [30]
    assert catalog.get_by_id(3) is catalog.get_slider("home-hero")
    assert catalog.get_by_id(4) is None


def test_unknown_slider_key_lists_known_keys() -> None:
    """Lookup errors name the configured sliders."""
    catalog = SliderCatalog(defaults=CatalogDefaults(), sliders={})
    with pytest.raises(KeyError, match="Unknown slider 'nope'"):
        catalog.get_slider("nope")


def test_missing_file_raises(tmp_path: Path) -> None:
    """Missing catalog files raise ``FileNotFoundError``."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_catalog(tmp_path / "missing.yaml")


def test_top_level_must_be_mapping(write_catalog: cabc.Callable[[str], Path]) -> None:
    """A YAML list at the top level is rejected."""
    with pytest.raises(TypeError, match="must be a mapping"):
        load_catalog(write_catalog("- a\n- b\n"))


@pytest.mark.parametrize(
    ("text", "message"),
    [
        pytest.param("defaults: {}\n", "No sliders defined", id="no-sliders"),
        pytest.param(
            "sliders:\n  a:\n    name: A\n",
            "requires a positive integer 'id'",
            id="missing-id",
        ),
        pytest.param(
            "sliders:\n  a:\n    id: true\n",
            "requires a positive integer 'id'",
            id="boolean-id",
        ),
        pytest.param(
            "sliders:\n  a:\n    id: 1\n    effect: cube\n",
            "unknown effect 'cube'",
            id="bad-effect",
        ),
        pytest.param(
            "sliders:\n  a:\n    id: 1\n  b:\n    id: 1\n",
            "reuses id 1",
            id="duplicate-slider",
        ),
        pytest.param(
            "sliders:\n  a:\n    id: 1\n    banners:\n      - id: 2\n"
            "  b:\n    id: 3\n    banners:\n      - id: 2\n",
            "declared more than once",
            id="duplicate-banner",
        ),
        pytest.param(
            "sliders:\n  a:\n    id: 1\n    banners:\n      - id: 2\n"
            "        type: carousel\n",
            "unknown type 'carousel'",
            id="bad-type",
        ),
        pytest.param(
            "sliders:\n  a:\n    id: 1\n    responsive_items: [1, 2]\n",
            "'responsive_items' must be a mapping",
            id="bad-responsive",
        ),
        pytest.param(
            "sliders:\n  a:\n    id: 1\n    autoplay_timeout: soon\n",
            "autoplay_timeout must be an integer",
            id="bad-timeout",
        ),
        pytest.param(
            "sliders:\n  a:\n    id: 1\n    banners:\n      - id: 2\n"
            "        active_to: someday\n",
            "must be an ISO date",
            id="bad-date",
        ),
    ],
)
def test_invalid_catalogs_raise_config_error(
    write_catalog: cabc.Callable[[str], Path], text: str, message: str
) -> None:
    """Invalid entries raise ``CatalogConfigError`` with a helpful message."""
    with pytest.raises(CatalogConfigError, match=message):
        load_catalog(write_catalog(text))


def test_config_error_is_value_error() -> None:
    """Callers may catch catalog problems as ``ValueError``."""
    assert issubclass(CatalogConfigError, ValueError)


def test_example_catalog_loads() -> None:
    """The catalog shipped in ``config/`` stays valid."""
    path = Path(__file__).resolve().parents[1] / "config" / "sliders.yaml"
    catalog = load_catalog(path)
    slider = catalog.get_slider("home")
    assert slider.effect == "fade"
    assert [banner.banner_type for banner in catalog.banners[slider.slider_id]] == [
        BannerType.IMAGE,
        BannerType.VIDEO,
        BannerType.CUSTOM,
    ]
