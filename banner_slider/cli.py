"""Cyclopts CLI entrypoint for rendering banner sliders from a YAML catalog.

The ``banner-slider`` console script renders a slider (preload hints plus the
carousel markup) into a static HTML fragment, or prints the Splide JSON
configuration for a slider. It is handy for previewing catalog changes and for
pre-rendering sliders in static builds.

Examples
--------
Render the ``home`` slider with the default catalog:

>>> from banner_slider.cli import main
>>> main(["render", "--slider", "home"])  # doctest: +SKIP

Print the carousel configuration:

>>> from banner_slider.cli import app
>>> app(["config", "--slider", "home"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._logging import configure_logging
from .attributes import ElementAttributePool, default_providers
from .config import load_catalog
from .content import JinjaContentFilter
from .media.dimensions import PillowDimensionProber
from .renderer import BannerRenderer
from .video_providers import LocalVideoProvider, VideoProviderRegistry
from .widget import SliderWidget

if typ.TYPE_CHECKING:
    from .config import SliderCatalog

DEFAULT_CONFIG = Path("config/sliders.yaml")

app = App(
    name="banner-slider",
    config=cyclopts.config.Env("BANNER_SLIDER_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def build_widget(
    catalog: SliderCatalog,
    slider_key: str,
    *,
    media_url: str | None = None,
    media_dir: Path | None = None,
) -> SliderWidget:
    """Compose a renderer and widget for ``slider_key`` backed by ``catalog``.

    Parameters
    ----------
    catalog : SliderCatalog
        Loaded catalog acting as slider, banner, and crop storage.
    slider_key : str
        Key of the slider in the catalog.
    media_url : str, optional
        Override for the catalog's media base URL.
    media_dir : Path, optional
        Override for the directory probed for image dimensions.

    Returns
    -------
    SliderWidget
        Widget ready to render the slider.
    """
    slider = catalog.get_slider(slider_key)
    resolved_media_url = media_url or catalog.defaults.media_url
    resolved_media_dir = media_dir or catalog.defaults.media_dir
    renderer = BannerRenderer(
        media_url=resolved_media_url,
        crop_repository=catalog,
        video_resolver=VideoProviderRegistry([LocalVideoProvider(resolved_media_url)]),
        attribute_pool=ElementAttributePool(default_providers()),
        dimension_prober=PillowDimensionProber(resolved_media_dir),
        content_filter=JinjaContentFilter({"media_url": resolved_media_url}),
    )
    return SliderWidget(
        slider_id=slider.slider_id,
        locator=catalog,
        banner_source=catalog,
        renderer=renderer,
    )


@app.command(help="Render a slider and its preload hints into an HTML fragment.")
def render(
    *,
    slider: typ.Annotated[str, Parameter(help="Slider key in the catalog")],
    config: typ.Annotated[
        Path,
        Parameter(help="Path to the slider catalog", env_var="BANNER_SLIDER_CONFIG"),
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None, Parameter(help="Override the output file")
    ] = None,
    media_url: typ.Annotated[
        str | None, Parameter(help="Override the media base URL")
    ] = None,
    media_dir: typ.Annotated[
        Path | None, Parameter(help="Override the media directory")
    ] = None,
) -> None:
    """Render the requested slider to disk.

    Parameters
    ----------
    slider : str
        Key of the slider to render.
    config : Path, optional
        Path to the ``sliders.yaml`` catalog (overridable via
        ``BANNER_SLIDER_CONFIG``).
    output : Path or None, optional
        Destination HTML file; defaults to the catalog's ``output`` setting.
    media_url : str or None, optional
        Media base URL used for image and video links.
    media_dir : Path or None, optional
        Directory probed for image dimensions.

    Returns
    -------
    None
        Writes the fragment and prints the written path.
    """
    configure_logging()
    catalog = load_catalog(config)
    widget = build_widget(catalog, slider, media_url=media_url, media_dir=media_dir)
    parts = [widget.render_preload_links(), widget.render()]
    html = "\n".join(part for part in parts if part)
    if not html.endswith("\n"):
        html += "\n"
    output_path = output or catalog.defaults.output
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    print(f"wrote {_format_path(output_path)}")


@app.command(name="config", help="Print the carousel JSON configuration of a slider.")
def show_config(
    *,
    slider: typ.Annotated[str, Parameter(help="Slider key in the catalog")],
    config: typ.Annotated[
        Path,
        Parameter(help="Path to the slider catalog", env_var="BANNER_SLIDER_CONFIG"),
    ] = DEFAULT_CONFIG,
) -> None:
    """Print the Splide configuration JSON for ``slider``."""
    configure_logging()
    catalog = load_catalog(config)
    widget = build_widget(catalog, slider)
    print(widget.get_slider_config())


def main(tokens: list[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers the ``banner-slider`` command.

    Parameters
    ----------
    tokens : list[str], optional
        Arguments to parse instead of ``sys.argv``.

    Examples
    --------
    >>> main(["config", "--slider", "home"])  # doctest: +SKIP
    """
    app(tokens)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
