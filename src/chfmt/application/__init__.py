"""Application-layer use-cases and request objects."""

from __future__ import annotations

from pathlib import Path

from chfmt.application.options import ConversionRequest
from chfmt.application.ports import CodecProvider
from chfmt.application.results import ConversionResult
from chfmt.types import Format


def build_conversion_request(
    *,
    root: Path,
    src: Format | str = Format.JPEG,
    dst: Format | str = Format.PNG,
) -> ConversionRequest:
    """Build a validated request via lazy use-case import."""
    from chfmt.application.use_cases import build_conversion_request as _impl

    return _impl(root=root, src=src, dst=dst)


def change_format(
    *,
    request: ConversionRequest,
    codecs: CodecProvider | None = None,
) -> ConversionResult:
    """Run a tree conversion via lazy use-case import."""
    from chfmt.application.use_cases import change_format as _impl

    return _impl(request=request, codecs=codecs)


__all__ = [
    "CodecProvider",
    "ConversionRequest",
    "ConversionResult",
    "build_conversion_request",
    "change_format",
]
