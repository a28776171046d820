"""Tools for building inline image options programmatically."""

from iterm2_images.create.builder import InlineImageBuilder

__all__ = ["InlineImageBuilder"]
