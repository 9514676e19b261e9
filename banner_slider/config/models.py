"""Typed dataclasses describing a slider catalog loaded from YAML."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from banner_slider.models import Banner, ResponsiveCrop, Slider


class CatalogConfigError(ValueError):
    """Raised when the slider catalog configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class CatalogDefaults:
    """Site-wide settings shared by every slider in the catalog."""

    media_url: str = "/media/"
    media_dir: Path = Path("pub/media")
    output: Path = Path("public/slider.html")


@dc.dataclass(slots=True)
class SliderCatalog:
    """In-memory storage of sliders, banners, and crops.

    The catalog satisfies the ``SliderLocator``, ``BannerSource``, and
    ``ResponsiveCropRepository`` contracts so it can back a renderer directly.

    Attributes
    ----------
    defaults : CatalogDefaults
        Media URL/directory and output path defaults.
    sliders : dict[str, Slider]
        Sliders keyed by their configuration key.
    banners : dict[int, list[Banner]]
        Banners grouped by slider id, in declaration order.
    crops : dict[int, list[ResponsiveCrop]]
        Responsive crops grouped by banner id.
    today : date, optional
        Date used for the banner activity window; defaults to the current
        local date.
    """

    defaults: CatalogDefaults
    sliders: dict[str, Slider]
    banners: dict[int, list[Banner]] = dc.field(default_factory=dict)
    crops: dict[int, list[ResponsiveCrop]] = dc.field(default_factory=dict)
    today: dt.date | None = None

    def get_slider(self, key: str) -> Slider:
        """Return the slider configured under ``key``."""
        try:
            return self.sliders[key]
        except KeyError as exc:
            available = ", ".join(sorted(self.sliders))
            msg = f"Unknown slider '{key}'. Known sliders: {available}"
            raise KeyError(msg) from exc

    def get_by_id(self, slider_id: int) -> Slider | None:
        """Return the slider with ``slider_id`` or ``None``."""
        return next(
            (
                slider
                for slider in self.sliders.values()
                if slider.slider_id == slider_id
            ),
            None,
        )

    def get_active_banners(self, slider_id: int) -> list[Banner]:
        """Return active banners within their date window, ordered by position."""
        today = self.today or dt.date.today()  # noqa: DTZ011 - storefront local date
        active = [
            banner
            for banner in self.banners.get(slider_id, [])
            if banner.is_active
            and (banner.active_from is None or banner.active_from <= today)
            and (banner.active_to is None or banner.active_to >= today)
        ]
        return sorted(active, key=lambda banner: banner.position)

    def get_by_banner_id(self, banner_id: int) -> list[ResponsiveCrop]:
        """Return the crops of one banner."""
        return list(self.crops.get(banner_id, []))

    def get_by_banner_ids(
        self, banner_ids: cabc.Sequence[int]
    ) -> dict[int, list[ResponsiveCrop]]:
        """Return crops grouped by banner id for the banners that have any."""
        return {
            banner_id: list(self.crops[banner_id])
            for banner_id in banner_ids
            if self.crops.get(banner_id)
        }


__all__ = ["CatalogConfigError", "CatalogDefaults", "SliderCatalog"]
