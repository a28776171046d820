"""Fluent builder API for inline image options."""

from iterm2_images.codec.inline_image import encode_inline_image, inline_image_to
from iterm2_images.core import options as opt
from iterm2_images.core.options import InlineImageOption, InlineImageOptions
from iterm2_images.io.counting import Sink


class InlineImageBuilder:
    """
    Fluent API for collecting inline image options.

    Example:
        >>> seq = (InlineImageBuilder()
        ...     .name("chart.png")
        ...     .width_percent(50)
        ...     .height_auto()
        ...     .preserve_aspect_ratio(True)
        ...     .encode(png_bytes))
    """

    def __init__(self) -> None:
        self._options: list[InlineImageOption] = []

    def _add(self, option: InlineImageOption) -> "InlineImageBuilder":
        self._options.append(option)
        return self

    def name(self, name: str) -> "InlineImageBuilder":
        """Set the display name."""
        return self._add(opt.with_name(name))

    def width_cells(self, cells: int) -> "InlineImageBuilder":
        """Set width in character cells."""
        return self._add(opt.with_width_cells(cells))

    def width_pixels(self, pixels: int) -> "InlineImageBuilder":
        """Set width in pixels."""
        return self._add(opt.with_width_pixels(pixels))

    def width_percent(self, percent: int) -> "InlineImageBuilder":
        """Set width as a percentage of the session width."""
        return self._add(opt.with_width_percent(percent))

    def width_auto(self) -> "InlineImageBuilder":
        """Use the image's own width."""
        return self._add(opt.with_width_auto())

    def height_cells(self, cells: int) -> "InlineImageBuilder":
        """Set height in character cells."""
        return self._add(opt.with_height_cells(cells))

    def height_pixels(self, pixels: int) -> "InlineImageBuilder":
        """Set height in pixels."""
        return self._add(opt.with_height_pixels(pixels))

    def height_percent(self, percent: int) -> "InlineImageBuilder":
        """Set height as a percentage of the session height."""
        return self._add(opt.with_height_percent(percent))

    def height_auto(self) -> "InlineImageBuilder":
        """Use the image's own height."""
        return self._add(opt.with_height_auto())

    def preserve_aspect_ratio(self, on: bool = True) -> "InlineImageBuilder":
        """Keep or ignore the original aspect ratio."""
        return self._add(opt.with_preserve_aspect_ratio(on))

    def inline(self, on: bool = True) -> "InlineImageBuilder":
        """Display inline (True) or download only (False)."""
        return self._add(opt.with_inline(on))

    def options(self) -> list[InlineImageOption]:
        """Return the collected options in call order."""
        return list(self._options)

    def build(self) -> InlineImageOptions:
        """Apply the collected options and return the resulting record."""
        return InlineImageOptions.from_options(*self._options)

    def write_to(self, sink: Sink, data: bytes) -> int:
        """Write the escape sequence for ``data`` to ``sink``."""
        return inline_image_to(sink, data, *self._options)

    def encode(self, data: bytes) -> bytes:
        """Return the escape sequence for ``data`` as bytes."""
        return encode_inline_image(data, *self._options)
