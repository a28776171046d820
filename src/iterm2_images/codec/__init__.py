"""Encoding of images into terminal escape sequences."""

from iterm2_images.codec.inline_image import encode_inline_image, inline_image, inline_image_to

__all__ = ["inline_image_to", "inline_image", "encode_inline_image"]
