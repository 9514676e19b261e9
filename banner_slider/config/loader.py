"""Load slider catalog YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from banner_slider.models import Banner, BannerType, ResponsiveCrop, Slider

from .helpers import _optional_int, _optional_str, _parse_date, _require_id
from .models import CatalogConfigError, CatalogDefaults, SliderCatalog


def load_catalog(path: Path) -> SliderCatalog:
    """Load the YAML file describing sliders, banners, and responsive crops.

    Parameters
    ----------
    path : Path
        Filesystem path to the catalog file (for example, ``sliders.yaml``).

    Returns
    -------
    SliderCatalog
        Parsed catalog including defaults, sliders keyed by name, banners
        grouped by slider id, and crops grouped by banner id.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    CatalogConfigError
        If sliders are missing or an entry is invalid (bad ids, duplicate ids,
        unknown banner type).

    Examples
    --------
    >>> from pathlib import Path
    >>> catalog = load_catalog(Path("config/sliders.yaml"))  # doctest: +SKIP
    >>> catalog.get_slider("home").effect  # doctest: +SKIP
    'fade'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    defaults = _build_defaults(raw.get("defaults") or {})
    sliders_raw = raw.get("sliders") or {}
    if not isinstance(sliders_raw, dict) or not sliders_raw:
        msg = "No sliders defined in catalog configuration."
        raise CatalogConfigError(msg)

    catalog = SliderCatalog(defaults=defaults, sliders={})
    seen_banners: set[int] = set()
    for key, payload in sliders_raw.items():
        match payload:
            case dict():
                pass
            case _:
                continue
        slider = _build_slider(str(key), payload)
        if slider.slider_id in {s.slider_id for s in catalog.sliders.values()}:
            msg = f"Slider '{key}' reuses id {slider.slider_id}."
            raise CatalogConfigError(msg)
        catalog.sliders[str(key)] = slider
        banners: list[Banner] = []
        for index, banner_payload in enumerate(payload.get("banners") or []):
            if not isinstance(banner_payload, dict):
                continue
            banner = _build_banner(slider.slider_id, index, banner_payload)
            if banner.banner_id in seen_banners:
                msg = f"Banner id {banner.banner_id} is declared more than once."
                raise CatalogConfigError(msg)
            seen_banners.add(banner.banner_id)
            banners.append(banner)
            crops = _build_crops(banner.banner_id, banner_payload.get("crops"))
            if crops:
                catalog.crops[banner.banner_id] = crops
        catalog.banners[slider.slider_id] = banners
    return catalog


def _build_defaults(payload: typ.Mapping[str, typ.Any]) -> CatalogDefaults:
    """Build catalog defaults from the ``defaults`` mapping."""
    base = CatalogDefaults()
    return CatalogDefaults(
        media_url=str(payload.get("media_url", base.media_url)),
        media_dir=Path(payload.get("media_dir", base.media_dir)),
        output=Path(payload.get("output", base.output)),
    )


def _build_slider(key: str, payload: typ.Mapping[str, typ.Any]) -> Slider:
    """Build a Slider for a single catalog entry."""
    context = f"Slider '{key}'"
    effect = _optional_str(payload.get("effect")) or "slide"
    if effect not in {"slide", "fade"}:
        msg = f"{context} has unknown effect '{effect}'."
        raise CatalogConfigError(msg)
    responsive_items = payload.get("responsive_items")
    if responsive_items is not None and not isinstance(responsive_items, str | dict):
        msg = f"{context} 'responsive_items' must be a mapping or JSON string."
        raise CatalogConfigError(msg)
    timeout = _optional_int(
        payload.get("autoplay_timeout"), f"{context} autoplay_timeout"
    )
    return Slider(
        slider_id=_require_id(payload.get("id"), context),
        name=_optional_str(payload.get("name")) or key.replace("-", " ").title(),
        effect=effect,
        loop_enabled=bool(payload.get("loop", False)),
        autoplay_enabled=bool(payload.get("autoplay", False)),
        autoplay_timeout=5000 if timeout is None else timeout,
        navigation_enabled=bool(payload.get("navigation", True)),
        pagination_enabled=bool(payload.get("pagination", True)),
        lazy_load_enabled=bool(payload.get("lazy_load", False)),
        auto_width_enabled=bool(payload.get("auto_width", False)),
        auto_height_enabled=bool(payload.get("auto_height", False)),
        responsive_enabled=bool(payload.get("responsive", False)),
        responsive_items=responsive_items,
    )


def _build_banner(
    slider_id: int, index: int, payload: typ.Mapping[str, typ.Any]
) -> Banner:
    """Build a Banner; ``index`` is the fallback position."""
    context = f"Banner #{index + 1} of slider {slider_id}"
    raw_type = _optional_str(payload.get("type")) or BannerType.IMAGE.value
    try:
        banner_type = BannerType(raw_type)
    except ValueError as exc:
        msg = f"{context} has unknown type '{raw_type}'."
        raise CatalogConfigError(msg) from exc
    position = _optional_int(payload.get("position"), f"{context} position")
    return Banner(
        banner_id=_require_id(payload.get("id"), context),
        slider_id=slider_id,
        name=_optional_str(payload.get("name")) or "",
        banner_type=banner_type,
        title=_optional_str(payload.get("title")),
        image=_optional_str(payload.get("image")),
        video_url=_optional_str(payload.get("video_url")),
        video_path=_optional_str(payload.get("video_path")),
        link_url=_optional_str(payload.get("link_url")),
        content=payload.get("content") or None,
        open_in_new_tab=bool(payload.get("open_in_new_tab", False)),
        preload_enabled=bool(payload.get("preload", False)),
        video_as_background=bool(payload.get("video_as_background", False)),
        video_aspect_ratio=_optional_str(payload.get("video_aspect_ratio")),
        is_active=bool(payload.get("active", True)),
        position=index if position is None else position,
        active_from=_parse_date(payload.get("active_from"), f"{context} active_from"),
        active_to=_parse_date(payload.get("active_to"), f"{context} active_to"),
    )


def _build_crops(banner_id: int, entries: object) -> list[ResponsiveCrop]:
    """Build the responsive crops declared under a banner."""
    match entries:
        case list() as items:
            pass
        case _:
            return []
    crops: list[ResponsiveCrop] = []
    for index, entry in enumerate(items):
        if not isinstance(entry, dict):
            continue
        context = f"Crop #{index + 1} of banner {banner_id}"
        crop_id = entry.get("id")
        crops.append(
            ResponsiveCrop(
                crop_id=index + 1 if crop_id is None else _require_id(crop_id, context),
                banner_id=banner_id,
                cropped_image=_optional_str(entry.get("cropped_image")),
                webp_image=_optional_str(entry.get("webp_image")),
                avif_image=_optional_str(entry.get("avif_image")),
                generate_webp=bool(entry.get("generate_webp", False)),
                generate_avif=bool(entry.get("generate_avif", False)),
                sort_order=_optional_int(
                    entry.get("sort_order"), f"{context} sort_order"
                ),
                target_width=_optional_int(
                    entry.get("target_width"), f"{context} target_width"
                ),
                target_height=_optional_int(
                    entry.get("target_height"), f"{context} target_height"
                ),
                media_query=_optional_str(entry.get("media_query")),
            )
        )
    return crops


__all__ = ["load_catalog"]
