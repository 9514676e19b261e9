"""Probe image dimensions of files stored under the media directory."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError


class PillowDimensionProber:
    """Read image headers with Pillow to obtain ``(width, height)``.

    Missing files and files Pillow cannot identify yield ``None``. Other I/O
    errors propagate so the caller can log them with context.
    """

    def __init__(self, media_dir: Path) -> None:
        self.media_dir = media_dir

    def probe(self, path: str) -> tuple[int, int] | None:
        """Return the pixel size of the media-relative ``path``, or ``None``."""
        absolute = self.media_dir / path.lstrip("/")
        if not absolute.is_file():
            return None
        try:
            with Image.open(absolute) as image:
                width, height = image.size
        except UnidentifiedImageError:
            return None
        return int(width), int(height)


__all__ = ["PillowDimensionProber"]
