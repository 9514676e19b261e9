"""Expand template directives embedded in custom banner HTML.

Custom banners and video overlays may reference storefront URLs with Jinja
expressions such as ``{{ media_url }}banner/logo.svg``. Content is rendered in
a sandboxed environment so editors cannot reach Python internals.
"""

from __future__ import annotations

import typing as typ

from jinja2.sandbox import SandboxedEnvironment

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class JinjaContentFilter:
    """Render banner content as a sandboxed Jinja template.

    Template errors propagate; :meth:`BannerRenderer.filter_content` catches
    them and falls back to the raw content.
    """

    def __init__(self, context: cabc.Mapping[str, typ.Any] | None = None) -> None:
        self.context = dict(context or {})
        self.env = SandboxedEnvironment(autoescape=False)

    def filter(self, content: str) -> str:
        """Return ``content`` with its directives expanded."""
        return self.env.from_string(content).render(**self.context)


__all__ = ["JinjaContentFilter"]
