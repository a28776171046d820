"""Output sinks for escape sequences."""

from iterm2_images.io.counting import CountingWriter, ShortWriteError, Sink

__all__ = ["CountingWriter", "ShortWriteError", "Sink"]
