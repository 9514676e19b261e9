"""Collect and merge element attributes from registered providers."""

from __future__ import annotations

import typing as typ

from .merger import merge_attributes

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from banner_slider.models import AttributeMap, Banner, Slider

    from .provider import ElementAttributeProvider


class ElementAttributePool:
    """Fold the output of every provider into one attribute map per element.

    Providers run in ascending ``sort_order``. Python's ``sorted`` is stable,
    so providers sharing a sort order keep their registration order. The
    sorted sequence is computed on first use and reused for the pool's
    lifetime.
    """

    def __init__(
        self, providers: cabc.Iterable[ElementAttributeProvider] = ()
    ) -> None:
        self._providers = list(providers)
        self._sorted_providers: list[ElementAttributeProvider] | None = None

    @property
    def providers(self) -> list[ElementAttributeProvider]:
        """Return the providers in execution order."""
        if self._sorted_providers is None:
            self._sorted_providers = sorted(
                self._providers, key=lambda provider: provider.sort_order
            )
        return self._sorted_providers

    def get_container_attributes(
        self, slider: Slider, banners: cabc.Sequence[Banner]
    ) -> AttributeMap:
        """Return merged container attributes from all providers."""
        attributes: AttributeMap = {}
        for provider in self.providers:
            attributes = merge_attributes(
                attributes, provider.get_container_attributes(slider, banners)
            )
        return attributes

    def get_slide_attributes(self, slider: Slider, banner: Banner) -> AttributeMap:
        """Return merged slide attributes from all providers."""
        attributes: AttributeMap = {}
        for provider in self.providers:
            attributes = merge_attributes(
                attributes, provider.get_slide_attributes(slider, banner)
            )
        return attributes

    def get_link_attributes(self, slider: Slider, banner: Banner) -> AttributeMap:
        """Return merged link attributes from all providers."""
        attributes: AttributeMap = {}
        for provider in self.providers:
            attributes = merge_attributes(
                attributes, provider.get_link_attributes(slider, banner)
            )
        return attributes


__all__ = ["ElementAttributePool"]
