"""Core data structures for inline image display options."""

from iterm2_images.core.options import (
    InlineImageOption,
    InlineImageOptions,
    with_height_auto,
    with_height_cells,
    with_height_percent,
    with_height_pixels,
    with_inline,
    with_name,
    with_preserve_aspect_ratio,
    with_width_auto,
    with_width_cells,
    with_width_percent,
    with_width_pixels,
)

__all__ = [
    "InlineImageOption",
    "InlineImageOptions",
    "with_name",
    "with_width_cells",
    "with_width_pixels",
    "with_width_percent",
    "with_width_auto",
    "with_height_cells",
    "with_height_pixels",
    "with_height_percent",
    "with_height_auto",
    "with_preserve_aspect_ratio",
    "with_inline",
]
