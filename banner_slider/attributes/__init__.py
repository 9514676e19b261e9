"""Attribute providers, the provider pool, and the class-aware merge helper."""

from .merger import merge_attributes
from .pool import ElementAttributePool
from .provider import ElementAttributeProvider
from .providers import (
    BackgroundVideoAttributeProvider,
    LinkTrackingAttributeProvider,
    SliderDataAttributeProvider,
    default_providers,
)

__all__ = [
    "BackgroundVideoAttributeProvider",
    "ElementAttributePool",
    "ElementAttributeProvider",
    "LinkTrackingAttributeProvider",
    "SliderDataAttributeProvider",
    "default_providers",
    "merge_attributes",
]
