"""Render responsive image and video banner sliders for storefront pages.

This package exposes the CLI entry points used by ``banner-slider`` and the
rendering API embedded by storefront applications.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from banner_slider import main
>>> main(["render", "--slider", "home"])  # doctest: +SKIP
>>> from banner_slider import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
