"""Display options for the Inline Images Protocol."""

from dataclasses import dataclass
from typing import Callable, Iterator


@dataclass(slots=True)
class InlineImageOptions:
    """
    Display parameters attached to an inline image.

    Every field holds the serialized wire value. An empty string means the
    field was never set and is left out of the escape sequence, so the
    terminal falls back to the protocol defaults.
    """
    name: str = ""
    width: str = ""
    height: str = ""
    preserve_aspect_ratio: str = ""
    inline: str = ""

    @classmethod
    def from_options(cls, *options: "InlineImageOption") -> "InlineImageOptions":
        """Apply options in call order to a fresh record."""
        record = cls()
        for option in options:
            option(record)
        return record

    def parameters(self) -> Iterator[tuple[str, str]]:
        """Yield (key, value) pairs for set fields in wire order.

        The name is yielded raw; base64 encoding happens in the encoder.
        """
        if self.name:
            yield "name", self.name
        if self.height:
            yield "height", self.height
        if self.width:
            yield "width", self.width
        if self.preserve_aspect_ratio:
            yield "preserveAspectRatio", self.preserve_aspect_ratio
        if self.inline:
            yield "inline", self.inline


InlineImageOption = Callable[[InlineImageOptions], None]


def _flag(on: bool) -> str:
    return "1" if on else "0"


def with_name(name: str) -> InlineImageOption:
    """Give a name to the inlined or downloaded image."""
    def option(opts: InlineImageOptions) -> None:
        opts.name = name
    return option


def with_width_cells(cells: int) -> InlineImageOption:
    """Set the width in character cells."""
    def option(opts: InlineImageOptions) -> None:
        opts.width = f"{cells}"
    return option


def with_width_pixels(pixels: int) -> InlineImageOption:
    """Set the width in pixels."""
    def option(opts: InlineImageOptions) -> None:
        opts.width = f"{pixels}px"
    return option


def with_width_percent(percent: int) -> InlineImageOption:
    """Set the width as a percentage of the session width."""
    def option(opts: InlineImageOptions) -> None:
        opts.width = f"{percent}%"
    return option


def with_width_auto() -> InlineImageOption:
    """Use the image's own size to pick the width."""
    def option(opts: InlineImageOptions) -> None:
        opts.width = "auto"
    return option


def with_height_cells(cells: int) -> InlineImageOption:
    """Set the height in character cells."""
    def option(opts: InlineImageOptions) -> None:
        opts.height = f"{cells}"
    return option


def with_height_pixels(pixels: int) -> InlineImageOption:
    """Set the height in pixels."""
    def option(opts: InlineImageOptions) -> None:
        opts.height = f"{pixels}px"
    return option


def with_height_percent(percent: int) -> InlineImageOption:
    """Set the height as a percentage of the session height."""
    def option(opts: InlineImageOptions) -> None:
        opts.height = f"{percent}%"
    return option


def with_height_auto() -> InlineImageOption:
    """Use the image's own size to pick the height."""
    def option(opts: InlineImageOptions) -> None:
        opts.height = "auto"
    return option


def with_preserve_aspect_ratio(flag: bool) -> InlineImageOption:
    """Choose whether the terminal keeps the original aspect ratio."""
    def option(opts: InlineImageOptions) -> None:
        opts.preserve_aspect_ratio = _flag(flag)
    return option


def with_inline(flag: bool) -> InlineImageOption:
    """Choose between inline display (True) and download only (False)."""
    def option(opts: InlineImageOptions) -> None:
        opts.inline = _flag(flag)
    return option
