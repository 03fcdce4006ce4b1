"""Codec registry and the decode/encode entry points."""

from __future__ import annotations

import logging

from PIL import Image, UnidentifiedImageError

from chfmt.codecs.base import ImageCodec
from chfmt.codecs.builtins import GifCodec, JpegCodec, PngCodec
from chfmt.errors import DecodeError, UnsupportedFormatError
from chfmt.types import Format, ImageStream

logger = logging.getLogger(__name__)


class CodecRegistry:
    """Registry mapping format tags to codecs."""

    def __init__(self) -> None:
        self._codecs: dict[Format, ImageCodec] = {}

    def register(self, codec: ImageCodec) -> None:
        """Register a codec under its format tag.

        Parameters
        ----------
        codec : ImageCodec
            Codec instance to register. Replaces any codec already
            registered for the same tag.

        Raises
        ------
        UnsupportedFormatError
            If the codec claims the ``unknown`` tag.
        """
        fmt = Format.parse(getattr(codec, "format", Format.UNKNOWN))
        if fmt is Format.UNKNOWN:
            raise UnsupportedFormatError("Codec must declare a known format tag.")
        self._codecs[fmt] = codec

    def formats(self) -> list[Format]:
        """Return registered format tags, sorted by name."""
        return sorted(self._codecs, key=lambda fmt: fmt.value)

    def get(self, fmt: Format | str) -> ImageCodec:
        """Get the codec registered for ``fmt``.

        Raises
        ------
        UnsupportedFormatError
            If no codec handles the format.
        """
        tag = Format.parse(fmt)
        try:
            return self._codecs[tag]
        except KeyError as exc:
            supported = ", ".join(f.value for f in self.formats())
            raise UnsupportedFormatError(
                f"Unsupported image format '{fmt}'. Supported formats: {supported}"
            ) from exc

    def detect(self, pil_format: str | None) -> Format:
        """Map a Pillow format name onto a registered tag."""
        for fmt, codec in self._codecs.items():
            if pil_format in codec.pil_formats:
                return fmt
        return Format.UNKNOWN

    def decode(self, stream: ImageStream) -> tuple[Image.Image, Format]:
        """Decode an image, detecting its encoding from the content.

        Parameters
        ----------
        stream : BinaryIO
            Readable binary stream positioned at the start of the image.

        Returns
        -------
        tuple[PIL.Image.Image, Format]
            The fully loaded image and the format the content was found in.

        Raises
        ------
        DecodeError
            If the data is corrupt or not in a registered encoding.
        """
        try:
            with Image.open(stream) as opened:
                pil_format = opened.format
                # Detach from the stream so the caller may close it.
                image = opened.copy()
        except UnidentifiedImageError as exc:
            raise DecodeError(f"Unrecognized image data: {exc}") from exc
        except Image.DecompressionBombError as exc:
            raise DecodeError(f"Image too large to decode: {exc}") from exc
        except (OSError, SyntaxError, ValueError) as exc:
            raise DecodeError(f"Corrupt image data: {exc}") from exc

        detected = self.detect(pil_format)
        if detected is Format.UNKNOWN:
            raise DecodeError(f"Unsupported image encoding: {pil_format}")
        logger.debug("decoded %s image %sx%s", detected, *image.size)
        return image, detected

    def encode(self, stream: ImageStream, image: Image.Image, fmt: Format | str) -> None:
        """Encode ``image`` into ``stream`` using the codec for ``fmt``."""
        self.get(fmt).encode(stream, image)


def create_default_registry() -> CodecRegistry:
    """Create a registry holding the JPEG, PNG and GIF codecs."""
    registry = CodecRegistry()
    registry.register(JpegCodec())
    registry.register(PngCodec())
    registry.register(GifCodec())
    return registry


_default_registry = create_default_registry()


def decode(stream: ImageStream) -> tuple[Image.Image, Format]:
    """Decode with the default registry."""
    return _default_registry.decode(stream)


def encode(stream: ImageStream, image: Image.Image, fmt: Format | str) -> None:
    """Encode with the default registry."""
    _default_registry.encode(stream, image, fmt)
