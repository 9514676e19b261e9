"""Common literal values used across banner_slider.

These constants keep CSS class names, MIME types, and rendering defaults
centralized so the renderer, the Jinja templates, and tests can import the same
values without drifting. Intended for internal use within the banner_slider
package.

Examples
--------
>>> from banner_slider import _constants
>>> _constants.DEFAULT_MEDIA_QUERY
'(min-width: 0px)'
>>> _constants.MIME_AVIF.startswith("image/")
True
"""

IMAGE_CLASS = "banner-slider-image"
VIDEO_WRAPPER_CLASS = "banner-slider-video-wrapper"
VIDEO_BACKGROUND_CLASS = "banner-slider-video-background"
VIDEO_OVERLAY_CLASS = "banner-slider-video-overlay"

DEFAULT_MEDIA_QUERY = "(min-width: 0px)"
DEFAULT_ASPECT_RATIO = "16:9"
DEFAULT_PADDING_BOTTOM = 56.25
DEFAULT_SIZES_DESCRIPTOR = "100vw"

MIME_AVIF = "image/avif"
MIME_WEBP = "image/webp"

VIDEO_FALLBACK_TEXT = "Your browser does not support the video tag."
VIDEO_FILL_STYLE = (
    "position:absolute;top:0;left:0;width:100%;height:100%;object-fit:cover;"
)
IFRAME_FILL_STYLE = "position:absolute;top:0;left:0;width:100%;height:100%;"
OVERLAY_STYLE = "position:absolute;top:0;left:0;width:100%;height:100%;"

SPLIDE_SPEED = 400
