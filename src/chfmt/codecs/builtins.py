"""Built-in Pillow codecs for JPEG, PNG and GIF."""

from __future__ import annotations

from PIL import Image

from chfmt.errors import EncodeError
from chfmt.types import Format, ImageStream

DEFAULT_JPEG_QUALITY = 75


class _PillowCodec:
    """Shared save logic; subclasses pick the format and allowed modes."""

    format: Format
    pil_format: str
    pil_formats: frozenset[str]
    writable_modes: frozenset[str] | None = None

    def prepare(self, image: Image.Image) -> Image.Image:
        """Return ``image`` converted to a mode this format can store."""
        if self.writable_modes is None or image.mode in self.writable_modes:
            return image
        return image.convert("RGB")

    def save_options(self) -> dict[str, object]:
        return {}

    def encode(self, stream: ImageStream, image: Image.Image) -> None:
        """Write ``image`` to ``stream`` with Pillow."""
        try:
            self.prepare(image).save(
                stream, format=self.pil_format, **self.save_options()
            )
        except (OSError, ValueError) as exc:
            raise EncodeError(f"Failed to encode image as {self.format}: {exc}") from exc


class JpegCodec(_PillowCodec):
    """JPEG codec. Alpha and palette images are flattened to RGB."""

    format = Format.JPEG
    pil_format = "JPEG"
    # MPO is the multi-picture JPEG variant written by many cameras.
    pil_formats = frozenset({"JPEG", "MPO"})
    writable_modes = frozenset({"L", "RGB", "CMYK"})

    def __init__(self, quality: int = DEFAULT_JPEG_QUALITY) -> None:
        self.quality = quality

    def save_options(self) -> dict[str, object]:
        return {"quality": self.quality}


class PngCodec(_PillowCodec):
    """PNG codec."""

    format = Format.PNG
    pil_format = "PNG"
    pil_formats = frozenset({"PNG"})
    writable_modes = frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"})


class GifCodec(_PillowCodec):
    """GIF codec. Pillow quantises to a palette on save."""

    format = Format.GIF
    pil_format = "GIF"
    pil_formats = frozenset({"GIF"})
