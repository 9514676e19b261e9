"""Merge HTML attribute maps contributed by independent sources."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from banner_slider.models import AttributeMap, AttributeValue

CLASS_ATTRIBUTE = "class"


def merge_attributes(
    existing: cabc.Mapping[str, AttributeValue],
    incoming: cabc.Mapping[str, AttributeValue],
) -> AttributeMap:
    """Return ``existing`` updated with ``incoming``.

    Plain attributes are overwritten by ``incoming``. The ``class`` attribute is
    unioned instead: tokens from both sides are concatenated, de-duplicated
    keeping the first occurrence, and re-joined with single spaces.

    Parameters
    ----------
    existing : Mapping[str, str | bool | int]
        Attributes collected so far. Left untouched.
    incoming : Mapping[str, str | bool | int]
        Attributes contributed by the next source.

    Returns
    -------
    dict[str, str | bool | int]
        A new mapping; keys of ``existing`` keep their position and new keys
        follow in ``incoming`` order.

    Examples
    --------
    >>> merge_attributes({"class": "a b"}, {"class": "b c"})
    {'class': 'a b c'}
    >>> merge_attributes({"x": 1}, {"x": 2})
    {'x': 2}
    """
    merged: AttributeMap = dict(existing)
    for name, value in incoming.items():
        if name == CLASS_ATTRIBUTE and CLASS_ATTRIBUTE in merged:
            merged[name] = _union_classes(merged[CLASS_ATTRIBUTE], value)
        else:
            merged[name] = value
    return merged


def _union_classes(existing: AttributeValue, incoming: AttributeValue) -> str:
    tokens = [*_class_tokens(existing), *_class_tokens(incoming)]
    return " ".join(dict.fromkeys(token for token in tokens if token))


def _class_tokens(value: AttributeValue) -> list[str]:
    if isinstance(value, str):
        return value.split()
    return [str(value)]


__all__ = ["CLASS_ATTRIBUTE", "merge_attributes"]
