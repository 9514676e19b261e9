"""Slider widget: resolve a slider, its banners, and the Splide configuration.

:class:`SliderWidget` is the presentation entry point. It lazily resolves the
slider and its active banners (memoized per instance), warms the renderer's
crop cache for the whole batch, converts stored settings into the JSON config
read by the Splide carousel, and renders ``slider.jinja``.

Example
-------
>>> widget = SliderWidget(  # doctest: +SKIP
...     slider_id=1, locator=catalog, banner_source=catalog, renderer=renderer
... )
>>> widget.get_slider_config()  # doctest: +SKIP
'{"type": "fade", "perPage": 1, ...}'
"""

from __future__ import annotations

import collections.abc as cabc
import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ._constants import SPLIDE_SPEED
from ._logging import get_logger

if typ.TYPE_CHECKING:
    from .interfaces import BannerSource, SliderLocator
    from .models import Banner, Slider
    from .renderer import BannerRenderer

logger = get_logger(__name__)

_UNRESOLVED: typ.Final = object()

_FALSE_STRINGS: typ.Final = frozenset({"", "0", "false"})


def _coerce_flag(value: typ.Any) -> bool:
    """Return ``value`` as a boolean, reading ``"0"`` and ``"false"`` as false.

    Examples
    --------
    >>> [_coerce_flag(value) for value in ("0", "false", "1", 0, True)]
    [False, False, True, False, True]
    """
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


# legacy carousel key -> (Splide key, coercion)
BREAKPOINT_KEYS: dict[str, tuple[str, cabc.Callable[[typ.Any], typ.Any]]] = {
    "items": ("perPage", int),
    "nav": ("arrows", _coerce_flag),
    "dots": ("pagination", _coerce_flag),
    "autoplay": ("autoplay", _coerce_flag),
    "gap": ("gap", lambda value: value),
}


class SliderConfigError(ValueError):
    """Raised when the slider configuration cannot be serialized to JSON."""


def convert_breakpoints(
    responsive: cabc.Mapping[typ.Any, typ.Any] | cabc.Sequence[typ.Any],
    slider_id: int | None = None,
) -> dict[int, dict[str, typ.Any]]:
    """Convert legacy per-breakpoint settings into Splide ``breakpoints``.

    Only recognized keys are copied; values that do not coerce are skipped
    with a warning, and breakpoints left without settings are dropped. A list
    is keyed by its indices.

    Examples
    --------
    >>> convert_breakpoints({"768": {"items": "2", "nav": "0", "loop": True}})
    {768: {'perPage': 2, 'arrows': False}}
    >>> convert_breakpoints({"0": {"loop": True}})
    {}
    >>> convert_breakpoints([{"items": 1}, {"items": 3}])
    {0: {'perPage': 1}, 1: {'perPage': 3}}
    """
    entries = (
        responsive.items()
        if isinstance(responsive, cabc.Mapping)
        else enumerate(responsive)
    )
    breakpoints: dict[int, dict[str, typ.Any]] = {}
    for breakpoint, settings in entries:
        if not isinstance(settings, dict):
            continue
        try:
            width = int(breakpoint)
        except (TypeError, ValueError):
            logger.warning("Skipping non-numeric slider breakpoint %r", breakpoint)
            continue
        converted: dict[str, typ.Any] = {}
        for legacy_key, (splide_key, coerce) in BREAKPOINT_KEYS.items():
            value = settings.get(legacy_key)
            if value is None:
                continue
            try:
                converted[splide_key] = coerce(value)
            except (TypeError, ValueError):
                logger.warning(
                    "Skipping invalid %r value %r at breakpoint %s of slider %s",
                    legacy_key,
                    value,
                    width,
                    slider_id,
                )
        if converted:
            breakpoints[width] = converted
    return breakpoints


def _decode_responsive_items(
    raw: str | cabc.Mapping[str, typ.Any] | cabc.Sequence[typ.Any] | None,
    slider_id: int,
) -> cabc.Mapping[typ.Any, typ.Any] | cabc.Sequence[typ.Any] | None:
    match raw:
        case None | "":
            return None
        case str() as text:
            try:
                decoded = json.loads(text)
            except json.JSONDecodeError as exc:
                logger.warning(
                    "Ignoring malformed responsive settings for slider %s: %s",
                    slider_id,
                    exc,
                )
                return None
            return decoded if isinstance(decoded, dict | list) else None
        case _:
            return raw


class SliderWidget:
    """Render one slider with its banners."""

    def __init__(
        self,
        *,
        slider_id: int | None,
        locator: SliderLocator,
        banner_source: BannerSource,
        renderer: BannerRenderer,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the widget and Jinja environment.

        Parameters
        ----------
        slider_id : int or None
            Identifier of the slider to show; a falsy id renders nothing.
        locator : SliderLocator
            Resolves the slider for the current request.
        banner_source : BannerSource
            Supplies the active banners of the slider.
        renderer : BannerRenderer
            Banner markup facade shared with the template.
        templates_dir : Path, optional
            Directory containing ``slider.jinja``; defaults to the package
            templates.
        """
        self.slider_id = slider_id
        self.locator = locator
        self.banner_source = banner_source
        self.renderer = renderer
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("slider.jinja")
        self._slider: Slider | None | object = _UNRESOLVED
        self._banners: list[Banner] | None = None

    def get_slider(self) -> Slider | None:
        """Return the slider, resolving it on first access."""
        if self._slider is _UNRESOLVED:
            self._slider = (
                self.locator.get_by_id(self.slider_id) if self.slider_id else None
            )
        return typ.cast("Slider | None", self._slider)

    def get_banners(self) -> list[Banner]:
        """Return the slider's active banners, warming the crop cache once."""
        if self._banners is not None:
            return self._banners
        slider = self.get_slider()
        if slider is None:
            self._banners = []
            return self._banners
        self._banners = list(self.banner_source.get_active_banners(slider.slider_id))
        if self._banners:
            self.renderer.preload_responsive_crops(self._banners)
        return self._banners

    def build_slider_config(self) -> dict[str, typ.Any]:
        """Return the Splide options as a JSON-serializable mapping."""
        slider = self.get_slider()
        if slider is None:
            return {}

        if slider.effect == "fade":
            slider_type = "fade"
        elif slider.loop_enabled:
            slider_type = "loop"
        else:
            slider_type = "slide"
        multiple = len(self.get_banners()) > 1

        config: dict[str, typ.Any] = {
            "type": slider_type,
            "perPage": 1,
            "perMove": 1,
            "autoplay": multiple and slider.autoplay_enabled,
            "interval": slider.autoplay_timeout,
            "pauseOnHover": True,
            "pauseOnFocus": True,
            "arrows": multiple and slider.navigation_enabled,
            "pagination": multiple and slider.pagination_enabled,
            "lazyLoad": "nearby" if slider.lazy_load_enabled else False,
            "autoWidth": slider.auto_width_enabled,
            "autoHeight": slider.auto_height_enabled,
            "speed": SPLIDE_SPEED,
            "rewind": not slider.loop_enabled and slider_type != "fade",
            "waitForTransition": True,
        }
        if slider.responsive_enabled:
            responsive = _decode_responsive_items(
                slider.responsive_items, slider.slider_id
            )
            if responsive is not None:
                config["breakpoints"] = convert_breakpoints(
                    responsive, slider.slider_id
                )
        return config

    def get_slider_config(self) -> str:
        """Return the Splide options serialized as JSON.

        Raises
        ------
        SliderConfigError
            When the configuration holds values JSON cannot represent.
        """
        config = self.build_slider_config()
        try:
            return json.dumps(config, allow_nan=False)
        except (TypeError, ValueError) as exc:
            msg = f"Slider {self.slider_id} configuration is not serializable: {exc}"
            raise SliderConfigError(msg) from exc

    def render_preload_links(self) -> str:
        """Return preload ``<link>`` tags for the slider's banners."""
        if self.get_slider() is None:
            return ""
        return self.renderer.render_preload_links_html(self.get_banners())

    def render(self) -> str:
        """Render the slider markup, or ``""`` when there is nothing to show."""
        slider = self.get_slider()
        banners = self.get_banners()
        if slider is None or not banners:
            return ""
        context = {
            "slider": slider,
            "banners": banners,
            "renderer": self.renderer,
            "slider_config": self.get_slider_config(),
        }
        return self.template.render(**context)


__all__ = [
    "BREAKPOINT_KEYS",
    "SliderConfigError",
    "SliderWidget",
    "convert_breakpoints",
]
