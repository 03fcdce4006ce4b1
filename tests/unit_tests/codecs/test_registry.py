"""Unit tests for codec registry decode/encode dispatch."""

from __future__ import annotations

import io
from collections.abc import Callable

import numpy as np
import pytest
from PIL import Image

from chfmt.codecs import CodecRegistry, create_default_registry, decode, encode
from chfmt.codecs.builtins import JpegCodec, PngCodec
from chfmt.errors import DecodeError, EncodeError, UnsupportedFormatError
from chfmt.types import Format

SampleImage = Callable[..., Image.Image]


@pytest.fixture
def encoded(sample_image: SampleImage) -> Callable[..., io.BytesIO]:
    """Return a helper encoding a sample image into an in-memory buffer."""

    def _encoded(
        pil_format: str, size: tuple[int, int] = (8, 6), mode: str = "RGB"
    ) -> io.BytesIO:
        buffer = io.BytesIO()
        sample_image(size, mode).save(buffer, format=pil_format)
        buffer.seek(0)
        return buffer

    return _encoded


def test_default_registry_formats() -> None:
    registry = create_default_registry()
    assert registry.formats() == [Format.GIF, Format.JPEG, Format.PNG]


@pytest.mark.parametrize("fmt", [Format.UNKNOWN, "bmp", "webp"])
def test_get_unsupported_format_raises(fmt: Format | str) -> None:
    registry = create_default_registry()
    with pytest.raises(UnsupportedFormatError, match="Unsupported image format"):
        registry.get(fmt)


def test_register_rejects_unknown_tag() -> None:
    class _Codec:
        format = Format.UNKNOWN
        pil_formats = frozenset({"BMP"})

        def encode(self, stream: object, image: object) -> None:
            del stream, image

    with pytest.raises(UnsupportedFormatError, match="known format tag"):
        CodecRegistry().register(_Codec())


def test_register_replaces_existing_codec() -> None:
    registry = CodecRegistry()
    first, second = PngCodec(), PngCodec()
    registry.register(first)
    registry.register(second)
    assert registry.get("png") is second


@pytest.mark.parametrize(
    ("pil_format", "expected"),
    [("JPEG", Format.JPEG), ("PNG", Format.PNG), ("GIF", Format.GIF)],
)
def test_decode_detects_format_from_content(
    encoded: Callable[..., io.BytesIO], pil_format: str, expected: Format
) -> None:
    image, detected = decode(encoded(pil_format))
    assert detected is expected
    assert image.size == (8, 6)


def test_decode_rejects_non_image_data() -> None:
    with pytest.raises(DecodeError, match="Unrecognized image data"):
        decode(io.BytesIO(b"definitely not an image"))


def test_decode_rejects_unregistered_encoding(
    encoded: Callable[..., io.BytesIO],
) -> None:
    with pytest.raises(DecodeError, match="Unsupported image encoding: BMP"):
        decode(encoded("BMP"))


def test_decode_rejects_truncated_data(encoded: Callable[..., io.BytesIO]) -> None:
    data = encoded("JPEG", size=(64, 64)).getvalue()
    with pytest.raises(DecodeError):
        decode(io.BytesIO(data[: len(data) // 2]))


def test_decode_rejects_oversized_image(
    encoded: Callable[..., io.BytesIO], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Report Pillow's pixel-count guard as a decode failure."""
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    with pytest.raises(DecodeError, match="Image too large to decode"):
        decode(encoded("PNG", size=(64, 64)))


def test_decoded_image_outlives_stream(encoded: Callable[..., io.BytesIO]) -> None:
    stream = encoded("PNG")
    image, _ = decode(stream)
    stream.close()
    assert image.getpixel((0, 0)) is not None


@pytest.mark.parametrize("fmt", [Format.JPEG, Format.PNG, Format.GIF])
def test_round_trip_keeps_dimensions(sample_image: SampleImage, fmt: Format) -> None:
    buffer = io.BytesIO()
    encode(buffer, sample_image((13, 7)), fmt)
    buffer.seek(0)

    image, detected = decode(buffer)
    assert detected is fmt
    assert image.size == (13, 7)


def test_png_round_trip_is_lossless(sample_image: SampleImage) -> None:
    original = sample_image((5, 4))
    buffer = io.BytesIO()
    encode(buffer, original, Format.PNG)
    buffer.seek(0)

    image, _ = decode(buffer)
    np.testing.assert_array_equal(np.asarray(image), np.asarray(original))


def test_jpeg_codec_flattens_alpha(sample_image: SampleImage) -> None:
    buffer = io.BytesIO()
    JpegCodec().encode(buffer, sample_image(mode="RGBA"))
    buffer.seek(0)
    with Image.open(buffer) as image:
        assert image.format == "JPEG"
        assert image.mode == "RGB"


def test_png_codec_converts_cmyk(sample_image: SampleImage) -> None:
    buffer = io.BytesIO()
    PngCodec().encode(buffer, sample_image(mode="CMYK"))
    buffer.seek(0)
    with Image.open(buffer) as image:
        assert image.mode == "RGB"


def test_jpeg_codec_uses_configured_quality(sample_image: SampleImage) -> None:
    low, high = io.BytesIO(), io.BytesIO()
    JpegCodec(quality=5).encode(low, sample_image((64, 64)))
    JpegCodec(quality=95).encode(high, sample_image((64, 64)))
    assert len(low.getvalue()) < len(high.getvalue())


def test_encode_wraps_pillow_failures(sample_image: SampleImage) -> None:
    class _BrokenStream(io.BytesIO):
        def write(self, data: object) -> int:
            raise OSError("disk full")

    with pytest.raises(EncodeError, match="Failed to encode image as png"):
        PngCodec().encode(_BrokenStream(), sample_image())


def test_encode_unknown_format_raises(sample_image: SampleImage) -> None:
    with pytest.raises(UnsupportedFormatError):
        encode(io.BytesIO(), sample_image(), Format.UNKNOWN)
