"""Tests for the ``banner-slider`` command line interface."""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json
import pytest
from bs4 import BeautifulSoup
from PIL import Image

from banner_slider import cli
from banner_slider.config import load_catalog

if typ.TYPE_CHECKING:
    from pathlib import Path

CATALOG_TEMPLATE = """\
defaults:
  media_url: https://cdn.example/media/
  media_dir: {media_dir}
  output: {output}
sliders:
  home:
    id: 1
    name: Home
    autoplay: true
    banners:
      - id: 10
        title: Sized
        image: banner/sized.png
        preload: true
      - id: 11
        type: video
        video_path: video/clip.mp4
        video_as_background: true
        content: '<a href="{{{{ media_url }}}}terms.pdf">Terms</a>'
"""


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    """Write a catalog with a real image under a temporary media directory."""
    media_dir = tmp_path / "media"
    (media_dir / "banner").mkdir(parents=True)
    Image.new("RGB", (320, 120), color="white").save(media_dir / "banner/sized.png")
    path = tmp_path / "sliders.yaml"
    path.write_text(
        CATALOG_TEMPLATE.format(media_dir=media_dir, output=tmp_path / "out/home.html"),
        encoding="utf-8",
    )
    return path


def test_render_writes_fragment(
    catalog_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``render`` writes preload hints followed by the slider markup."""
    cli.render(slider="home", config=catalog_path)

    output = tmp_path / "out/home.html"
    assert output.exists(), "expected the catalog output path to be written"
    assert f"wrote {output}" in capsys.readouterr().out

    html = output.read_text(encoding="utf-8")
    assert html.startswith('<link rel="preload" as="image"'), html[:80]
    assert html.endswith("\n")
    soup = BeautifulSoup(html, "html.parser")
    image = soup.find("img")
    assert image is not None
    assert (image["width"], image["height"]) == ("320", "120"), (
        "dimensions should be probed with Pillow"
    )
    video = soup.find("video")
    assert video is not None
    assert video["src"] == "https://cdn.example/media/video/clip.mp4"
    overlay = soup.find("div", class_="banner-slider-video-overlay")
    assert overlay is not None
    assert overlay.find("a")["href"] == "https://cdn.example/media/terms.pdf"
    section = soup.find("section")
    assert section["data-slider-id"] == "1", "default providers should be active"


def test_render_honours_overrides(catalog_path: Path, tmp_path: Path) -> None:
    """Output path and media URL can be overridden per invocation."""
    target = tmp_path / "custom.html"
    cli.render(
        slider="home",
        config=catalog_path,
        output=target,
        media_url="https://img.example/",
        media_dir=tmp_path / "empty",
    )
    soup = BeautifulSoup(target.read_text(encoding="utf-8"), "html.parser")
    image = soup.find("img")
    assert image["src"] == "https://img.example/banner/sized.png"
    assert not image.has_attr("width"), "missing media files yield no dimensions"


def test_show_config_prints_json(
    catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``config`` prints the carousel configuration as JSON."""
    cli.show_config(slider="home", config=catalog_path)
    payload = msgspec_json.decode(capsys.readouterr().out)
    assert payload["type"] == "slide"
    assert payload["autoplay"] is True
    assert payload["arrows"] is True


def test_unknown_slider_raises(catalog_path: Path) -> None:
    """Unknown slider keys surface as ``KeyError``."""
    with pytest.raises(KeyError, match="Unknown slider 'promo'"):
        cli.render(slider="promo", config=catalog_path)


def test_main_dispatches_to_config_command(
    catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``main`` parses tokens through the Cyclopts app."""
    tokens = ["config", "--slider", "home", "--config", str(catalog_path)]
    try:
        cli.main(tokens)
    except SystemExit as exc:  # newer Cyclopts releases exit after a command
        assert exc.code in (None, 0), f"unexpected exit code {exc.code!r}"
    assert msgspec_json.decode(capsys.readouterr().out)["perPage"] == 1


def test_build_widget_uses_catalog_defaults(catalog_path: Path) -> None:
    """The composed renderer takes its media URL from the catalog."""
    catalog = load_catalog(catalog_path)
    widget = cli.build_widget(catalog, "home")
    assert widget.renderer.media_url == "https://cdn.example/media/"
    assert widget.get_slider() is catalog.get_slider("home")
