"""Load and validate slider catalog YAML for banner slider rendering.

This subpackage parses a ``sliders.yaml`` file into typed records
(:class:`~banner_slider.models.Slider`, :class:`~banner_slider.models.Banner`,
:class:`~banner_slider.models.ResponsiveCrop`) gathered in a
:class:`SliderCatalog`. The catalog doubles as an in-memory storage backend for
the renderer. The primary entry point is :func:`load_catalog`.

Examples
--------
>>> from pathlib import Path
>>> from banner_slider.config import load_catalog
>>> catalog = load_catalog(Path("config/sliders.yaml"))  # doctest: +SKIP
>>> catalog.get_slider("home").slider_id  # doctest: +SKIP
1
"""

from .loader import load_catalog
from .models import CatalogConfigError, CatalogDefaults, SliderCatalog

__all__ = ["CatalogConfigError", "CatalogDefaults", "SliderCatalog", "load_catalog"]
