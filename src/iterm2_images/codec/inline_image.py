"""Encode images as iTerm2 Inline Images Protocol escape sequences.

The sequence written for each image is::

    ESC ] 1337 ; File=size=N [;key=value ...] : base64(data) BEL

Optional parameters are emitted in a fixed order (name, height, width,
preserveAspectRatio, inline) and only when set. See
https://iterm2.com/documentation-images.html for the protocol itself.
"""

import base64
import io
import logging
import sys

from iterm2_images.core.options import InlineImageOption, InlineImageOptions
from iterm2_images.io.counting import CountingWriter, Sink


logger = logging.getLogger(__name__)

OSC = b"\x1b]"
BEL = b"\x07"


def inline_image_to(
    sink: Sink,
    data: bytes | bytearray | memoryview,
    *options: InlineImageOption,
) -> int:
    """
    Write the escape sequence that inlines or downloads ``data`` to ``sink``.

    Options are applied in call order; later options for the same field
    replace earlier ones. Unset fields use the terminal's defaults.

    Returns the number of bytes the sink accepted. If a write fails, the
    sink's exception is re-raised as is, with a ``bytes_written`` attribute
    holding the bytes accepted before the failure. Nothing is written after
    a failure. Errors raised while encoding the options (e.g. a name that
    is not valid UTF-8) are raised before anything is written and carry no
    ``bytes_written``.
    """
    opts = InlineImageOptions.from_options(*options)
    # size is in bytes, whatever the item format of the buffer
    data = memoryview(data).cast("B")

    params = []
    for key, value in opts.parameters():
        if key == "name":
            encoded = base64.b64encode(value.encode("utf-8"))
        else:
            encoded = value.encode("ascii")
        params.append(b";%s=%s" % (key.encode("ascii"), encoded))

    writer = CountingWriter(sink)
    try:
        writer.write(OSC + b"1337;File=size=%d" % len(data))
        for param in params:
            writer.write(param)
        writer.write(b":" + base64.b64encode(data) + BEL)
    except Exception as exc:
        logger.debug("Sink write failed after %d bytes: %r", writer.written, exc)
        exc.bytes_written = writer.written
        raise

    logger.debug(
        "Encoded %d-byte image as %d-byte sequence (params: %s)",
        len(data),
        writer.written,
        ", ".join(key for key, _ in opts.parameters()) or "none",
    )
    return writer.written


def inline_image(data: bytes | bytearray | memoryview, *options: InlineImageOption) -> int:
    """Same as :func:`inline_image_to` with standard output as the sink.

    Text already printed to ``sys.stdout`` is flushed first so it lands
    before the image.
    """
    sys.stdout.flush()
    out = sys.stdout.buffer
    written = inline_image_to(out, data, *options)
    out.flush()
    return written


def encode_inline_image(data: bytes | bytearray | memoryview, *options: InlineImageOption) -> bytes:
    """Return the complete escape sequence as bytes."""
    buffer = io.BytesIO()
    inline_image_to(buffer, data, *options)
    return buffer.getvalue()
