"""Small HTML tag builders shared by the picture, video, and preload renderers."""

from __future__ import annotations

import typing as typ
from html import escape

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from banner_slider.models import AttributeValue

VOID_ELEMENTS = frozenset({"img", "source", "link", "meta", "br", "hr", "input"})


def render_tag_attributes(attributes: cabc.Mapping[str, AttributeValue | None]) -> str:
    """Render ``attributes`` as a space-prefixed string for an opening tag.

    ``True`` renders a bare attribute name, ``False`` and ``None`` are
    omitted, everything else is rendered as an escaped ``name="value"`` pair.

    Examples
    --------
    >>> render_tag_attributes({"class": "a", "hidden": True, "title": None})
    ' class="a" hidden'
    """
    parts: list[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        safe_name = escape(name, quote=True)
        if value is True:
            parts.append(f" {safe_name}")
        else:
            parts.append(f' {safe_name}="{escape(str(value), quote=True)}"')
    return "".join(parts)


def build_attribute_string(attributes: cabc.Mapping[str, AttributeValue | None]) -> str:
    """Render ``attributes`` space-separated, collapsing ``name="name"`` pairs.

    Examples
    --------
    >>> build_attribute_string({"href": "/sale", "download": "download"})
    'href="/sale" download'
    """
    parts: list[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        safe_name = escape(name, quote=True)
        if value is True or value == name:
            parts.append(safe_name)
        else:
            parts.append(f'{safe_name}="{escape(str(value), quote=True)}"')
    return " ".join(parts)


def tag(
    name: str,
    content: str = "",
    attributes: cabc.Mapping[str, AttributeValue | None] | None = None,
) -> str:
    """Return an HTML element; ``content`` is trusted markup and not escaped."""
    opening = f"<{name}{render_tag_attributes(attributes or {})}>"
    if name in VOID_ELEMENTS:
        return opening
    return f"{opening}{content}</{name}>"


def img(src: str, attributes: cabc.Mapping[str, AttributeValue | None]) -> str:
    """Return an ``<img>`` tag with ``src`` rendered first."""
    return tag("img", attributes={"src": src, **attributes})


__all__ = ["build_attribute_string", "img", "render_tag_attributes", "tag"]
