"""Render a ``<picture>`` element from a banner's responsive crops."""

from __future__ import annotations

import typing as typ

from banner_slider._constants import IMAGE_CLASS

from .crops import build_sources, join_media_url, select_fallback
from .markup import img, tag

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from banner_slider.models import AttributeMap, Banner, ResponsiveCrop


def image_alt(banner: Banner) -> str:
    """Return the banner title, else its name, else an empty string."""
    return banner.title or banner.name or ""


class PictureMarkupBuilder:
    """Build ``<picture>`` markup with format-specific sources per breakpoint."""

    def __init__(self, media_url: str) -> None:
        self.media_url = media_url

    def build(
        self,
        banner: Banner,
        crops: cabc.Sequence[ResponsiveCrop],
        *,
        lazy_load: bool = False,
        fallback_url: str | None = None,
    ) -> str | None:
        """Return the ``<picture>`` markup, or ``None`` when no source qualifies.

        Parameters
        ----------
        banner : Banner
            Banner supplying the ``alt`` text.
        crops : Sequence[ResponsiveCrop]
            Crops of the banner in any order.
        lazy_load : bool, optional
            Add ``loading="lazy"`` to the fallback image.
        fallback_url : str, optional
            Plain image URL used when no crop provides a fallback.

        Returns
        -------
        str | None
            ``None`` tells the caller to render the plain ``<img>`` instead.
        """
        sources = build_sources(crops, self.media_url)
        if not sources:
            return None

        options: AttributeMap = {"alt": image_alt(banner), "class": IMAGE_CLASS}
        fallback = select_fallback(crops)
        src = fallback_url or ""
        if fallback is not None and fallback.cropped_image:
            src = join_media_url(self.media_url, fallback.cropped_image)
            # width/height reserve layout space before the image loads
            if fallback.target_width and fallback.target_height:
                options["width"] = int(fallback.target_width)
                options["height"] = int(fallback.target_height)
        if lazy_load:
            options["loading"] = "lazy"

        lines = [
            f"    {tag('source', attributes=source.attributes())}" for source in sources
        ]
        lines.append(f"    {img(src, options)}")
        return tag("picture", "\n" + "\n".join(lines) + "\n")


__all__ = ["PictureMarkupBuilder", "image_alt"]
