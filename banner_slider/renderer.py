"""Banner rendering facade consumed by the slider templates.

:class:`BannerRenderer` composes the attribute pool, the responsive picture
and preload builders, and the video builder. It also owns two request-scoped
caches: responsive crops keyed by banner id and probed image dimensions keyed
by path. Create one renderer per render pass, or call :meth:`reset` between
passes.

Collaborator failures (crop repository, dimension prober, content filter) are
logged and degraded to empty results so a broken banner never breaks the
page.

Example
-------
>>> from banner_slider.attributes import ElementAttributePool
>>> from banner_slider.models import Banner
>>> renderer = BannerRenderer(  # doctest: +SKIP
...     media_url="https://cdn.example/media/",
...     crop_repository=catalog,
...     video_resolver=registry,
...     attribute_pool=ElementAttributePool(),
... )
>>> renderer.get_image_url(Banner(1, 1, image="hero.jpg"))  # doctest: +SKIP
'https://cdn.example/media/hero.jpg'
"""

from __future__ import annotations

import typing as typ

from ._constants import IMAGE_CLASS
from ._logging import get_logger
from .attributes import ElementAttributePool, merge_attributes
from .media.crops import join_media_url
from .media.markup import build_attribute_string, img, render_tag_attributes, tag
from .media.picture import PictureMarkupBuilder, image_alt
from .media.preload import PreloadLinkBuilder
from .media.video import VideoMarkupBuilder
from .models import BannerType

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .interfaces import (
        ContentFilter,
        DimensionProber,
        ResponsiveCropRepository,
        VideoProvider,
        VideoProviderResolver,
    )
    from .models import AttributeMap, Banner, PreloadLink, ResponsiveCrop, Slider

logger = get_logger(__name__)


class BannerRenderer:
    """Generate image, picture, video, preload, and attribute markup for banners."""

    def __init__(
        self,
        *,
        media_url: str,
        crop_repository: ResponsiveCropRepository,
        video_resolver: VideoProviderResolver,
        attribute_pool: ElementAttributePool | None = None,
        dimension_prober: DimensionProber | None = None,
        content_filter: ContentFilter | None = None,
    ) -> None:
        """Initialize the renderer with its collaborators.

        Parameters
        ----------
        media_url : str
            Public base URL of the media directory.
        crop_repository : ResponsiveCropRepository
            Source of responsive crops per banner.
        video_resolver : VideoProviderResolver
            Maps video references to providers.
        attribute_pool : ElementAttributePool, optional
            Extra attributes for containers, slides, and links. Defaults to an
            empty pool.
        dimension_prober : DimensionProber, optional
            Reads image sizes for plain ``<img>`` tags; dimensions are omitted
            when ``None``.
        content_filter : ContentFilter, optional
            Expands directives in custom HTML; content is returned verbatim
            when ``None``.
        """
        self.media_url = media_url
        self.crop_repository = crop_repository
        self.attribute_pool = attribute_pool or ElementAttributePool()
        self.dimension_prober = dimension_prober
        self.content_filter = content_filter
        self.picture_builder = PictureMarkupBuilder(media_url)
        self.preload_builder = PreloadLinkBuilder(media_url)
        self.video_builder = VideoMarkupBuilder(video_resolver, self.filter_content)
        self._crops_cache: dict[int, list[ResponsiveCrop]] = {}
        self._dimensions_cache: dict[str, tuple[int, int] | None] = {}

    def reset(self) -> None:
        """Drop cached crops and image dimensions before a new render pass."""
        self._crops_cache.clear()
        self._dimensions_cache.clear()

    @staticmethod
    def is_video_type(banner: Banner) -> bool:
        """Return ``True`` for video banners."""
        return banner.banner_type is BannerType.VIDEO

    @staticmethod
    def is_custom_type(banner: Banner) -> bool:
        """Return ``True`` for custom HTML banners."""
        return banner.banner_type is BannerType.CUSTOM

    @staticmethod
    def has_link(banner: Banner) -> bool:
        """Return ``True`` when the banner links somewhere."""
        return bool(banner.link_url)

    def filter_content(self, content: str | None) -> str:
        """Expand directives in ``content``, returning it unchanged on failure."""
        if not content:
            return ""
        if self.content_filter is None:
            return content
        try:
            return self.content_filter.filter(content)
        except Exception as exc:  # noqa: BLE001 - degrade to raw content
            logger.error("Error filtering banner content: %s", exc)
            return content

    def get_image_url(self, banner: Banner) -> str | None:
        """Return the public URL of the banner image, or ``None``."""
        if not banner.image:
            return None
        return join_media_url(self.media_url, banner.image)

    def get_image_html(self, banner: Banner, *, lazy_load: bool = False) -> str:
        """Return a plain ``<img>`` tag for the banner image, or ``""``."""
        image_url = self.get_image_url(banner)
        if not image_url or not banner.image:
            return ""

        options: AttributeMap = {"alt": image_alt(banner), "class": IMAGE_CLASS}
        if lazy_load:
            options["loading"] = "lazy"
        dimensions = self.get_image_dimensions("/" + banner.image.lstrip("/"))
        if dimensions:
            options["width"], options["height"] = dimensions
        return img(image_url, options)

    def get_image_dimensions(self, image_path: str) -> tuple[int, int] | None:
        """Return cached ``(width, height)`` for ``image_path``.

        Failed probes are cached as ``None`` and never retried within the same
        render pass.
        """
        if image_path in self._dimensions_cache:
            return self._dimensions_cache[image_path]

        dimensions: tuple[int, int] | None = None
        if self.dimension_prober is not None:
            try:
                dimensions = self.dimension_prober.probe(image_path)
            except Exception as exc:  # noqa: BLE001 - dimensions are optional
                logger.error(
                    "Error getting image dimensions for %s: %s", image_path, exc
                )
                dimensions = None
        self._dimensions_cache[image_path] = dimensions
        return dimensions

    def preload_responsive_crops(self, banners: cabc.Iterable[Banner]) -> None:
        """Fetch crops for every uncached banner in one repository call.

        Call this before rendering a batch of banners. Every requested id ends
        up cached, with an empty list when the repository has no crops for it
        or the lookup fails.
        """
        banner_ids = list(
            dict.fromkeys(
                banner.banner_id
                for banner in banners
                if banner.banner_id and banner.banner_id not in self._crops_cache
            )
        )
        if not banner_ids:
            return

        try:
            grouped = self.crop_repository.get_by_banner_ids(banner_ids)
        except Exception as exc:  # noqa: BLE001 - rendering continues without crops
            logger.error(
                "Error preloading responsive crops for banners %s: %s", banner_ids, exc
            )
            grouped = {}
        for banner_id in banner_ids:
            self._crops_cache[banner_id] = list(grouped.get(banner_id, []))

    def get_responsive_crops(self, banner: Banner) -> list[ResponsiveCrop]:
        """Return the banner's responsive crops, loading them on first access."""
        banner_id = banner.banner_id
        if not banner_id:
            return []
        if banner_id not in self._crops_cache:
            try:
                crops = list(self.crop_repository.get_by_banner_id(banner_id))
            except Exception as exc:  # noqa: BLE001 - rendering continues without crops
                logger.error(
                    "Error loading responsive crops for banner %s: %s", banner_id, exc
                )
                crops = []
            self._crops_cache[banner_id] = crops
        return self._crops_cache[banner_id]

    def has_responsive_crops(self, banner: Banner) -> bool:
        """Return ``True`` when the banner has at least one responsive crop."""
        return bool(self.get_responsive_crops(banner))

    def get_responsive_image_html(
        self, banner: Banner, *, lazy_load: bool = False
    ) -> str:
        """Return ``<picture>`` markup, falling back to the plain ``<img>`` path."""
        crops = self.get_responsive_crops(banner)
        if not crops:
            return self.get_image_html(banner, lazy_load=lazy_load)
        picture = self.picture_builder.build(
            banner,
            crops,
            lazy_load=lazy_load,
            fallback_url=self.get_image_url(banner),
        )
        if picture is None:
            return self.get_image_html(banner, lazy_load=lazy_load)
        return picture

    def get_video_provider(self, banner: Banner) -> VideoProvider | None:
        """Return the provider resolved for the banner's video reference."""
        return self.video_builder.get_provider(banner)

    def get_video_data(self, banner: Banner) -> object | None:
        """Return parsed video data for the banner, or ``None``."""
        return self.video_builder.get_video_data(banner)

    def get_video_html(self, banner: Banner) -> str:
        """Return the wrapped video markup for the banner, or ``""``."""
        return self.video_builder.render(banner)

    def get_preload_links(self, banner: Banner) -> list[PreloadLink]:
        """Return preload hints when the banner opted into preloading."""
        if not banner.preload_enabled:
            return []
        return self.get_preload_links_for_banner(banner)

    def get_preload_links_for_banner(self, banner: Banner) -> list[PreloadLink]:
        """Return preload hints without checking the banner's preload flag."""
        crops = self.get_responsive_crops(banner)
        if crops:
            return self.preload_builder.build_responsive(crops)
        return self.preload_builder.build_plain(self.get_image_url(banner))

    def render_preload_links_html(self, banners: cabc.Iterable[Banner]) -> str:
        """Return ``<link>`` tags for every preload-enabled banner."""
        return "\n".join(
            tag("link", attributes=link.attributes())
            for banner in banners
            for link in self.get_preload_links(banner)
        )

    def get_link_attributes(self, banner: Banner, slider: Slider | None = None) -> str:
        """Return the anchor attribute string for a linked banner."""
        attributes: AttributeMap = {}
        if banner.link_url:
            attributes["href"] = banner.link_url
            if banner.open_in_new_tab:
                attributes["target"] = "_blank"
                attributes["rel"] = "noopener noreferrer"
            if banner.title:
                attributes["title"] = banner.title
        if slider is not None:
            attributes = merge_attributes(
                attributes, self.attribute_pool.get_link_attributes(slider, banner)
            )
        return build_attribute_string(attributes)

    def get_container_attributes_html(
        self,
        slider: Slider,
        banners: cabc.Sequence[Banner],
        base_attributes: AttributeMap | None = None,
    ) -> str:
        """Return container attributes merged with the pool, space-prefixed."""
        merged = merge_attributes(
            base_attributes or {},
            self.attribute_pool.get_container_attributes(slider, banners),
        )
        return render_tag_attributes(merged)

    def get_slide_attributes_html(
        self,
        slider: Slider,
        banner: Banner,
        base_attributes: AttributeMap | None = None,
    ) -> str:
        """Return slide attributes merged with the pool, space-prefixed."""
        merged = merge_attributes(
            base_attributes or {},
            self.attribute_pool.get_slide_attributes(slider, banner),
        )
        return render_tag_attributes(merged)


__all__ = ["BannerRenderer"]
