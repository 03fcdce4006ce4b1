"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from chfmt.types import Format, ImageStream

if TYPE_CHECKING:
    from PIL import Image

    from chfmt.codecs.base import ImageCodec


class CodecProvider(Protocol):
    """Decode images and look up encoders by format tag."""

    def decode(self, stream: ImageStream) -> tuple[Image.Image, Format]:
        """Decode ``stream`` and report the detected format."""

    def get(self, fmt: Format | str) -> ImageCodec:
        """Return the encoder for ``fmt`` or raise ``UnsupportedFormatError``."""
