"""
iterm2-images: display images inline in iTerm2-compatible terminals

Encodes arbitrary image bytes as the iTerm2 Inline Images Protocol escape
sequence and writes it to any byte sink.

Quick Start:
    >>> import iterm2_images as it2
    >>> with open("logo.png", "rb") as f:
    ...     it2.inline_image(f.read(), it2.with_width_cells(40), it2.with_name("logo.png"))

Features:
    - Byte-exact OSC 1337 File sequences
    - Functional options or a fluent builder for name, size, aspect ratio, inline/download
    - Write to stdout, an in-memory buffer, a socket file, or any object with write()
    - Accurate byte counts, including after a failed write
"""

__version__ = "0.1.0"

from iterm2_images.log import enable_debug_logging

# Options
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

# Encoding
from iterm2_images.codec.inline_image import encode_inline_image, inline_image, inline_image_to
from iterm2_images.io.counting import CountingWriter, ShortWriteError, Sink

# Creation
from iterm2_images.create.builder import InlineImageBuilder


def options() -> InlineImageBuilder:
    """Start collecting inline image options with a fluent builder API."""
    return InlineImageBuilder()


__all__ = [
    # Version
    "__version__",
    # Options
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
    # Encoding
    "inline_image_to",
    "inline_image",
    "encode_inline_image",
    "CountingWriter",
    "ShortWriteError",
    "Sink",
    # Creation
    "options",
    "InlineImageBuilder",
    # Logging
    "enable_debug_logging",
]
