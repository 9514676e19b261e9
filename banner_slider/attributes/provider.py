"""Capability contract for contributors of slider element attributes."""

from __future__ import annotations

import abc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from banner_slider.models import AttributeMap, Banner, Slider


class ElementAttributeProvider(abc.ABC):  # noqa: B024 - all hooks are optional
    """Contribute HTML attributes to the slider container, slides, and links.

    Subclasses override the hooks they care about; the defaults contribute
    nothing. Providers must not raise for missing or irrelevant data and must
    not depend on the output of other providers.
    """

    sort_order: int = 0

    def get_container_attributes(
        self, slider: Slider, banners: cabc.Sequence[Banner]
    ) -> AttributeMap:
        """Return attributes for the slider container element."""
        return {}

    def get_slide_attributes(self, slider: Slider, banner: Banner) -> AttributeMap:
        """Return attributes for one slide element."""
        return {}

    def get_link_attributes(self, slider: Slider, banner: Banner) -> AttributeMap:
        """Return attributes for the anchor wrapping a banner."""
        return {}


__all__ = ["ElementAttributeProvider"]
