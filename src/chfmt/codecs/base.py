"""Codec protocol for format-specific image encoders."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from PIL import Image

from chfmt.types import Format, ImageStream


@runtime_checkable
class ImageCodec(Protocol):
    """Protocol implemented by format codecs."""

    format: Format
    pil_formats: frozenset[str]

    def encode(self, stream: ImageStream, image: Image.Image) -> None:
        """Write ``image`` to ``stream`` in this codec's format.

        Parameters
        ----------
        stream : BinaryIO
            Writable binary stream.
        image : PIL.Image.Image
            Fully loaded image.

        Raises
        ------
        EncodeError
            If the codec library cannot write the image.
        """
