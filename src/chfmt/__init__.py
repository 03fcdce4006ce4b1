"""Bulk image format conversion over a directory tree."""

from __future__ import annotations

import os

from chfmt.application.results import ConversionResult
from chfmt.formats import change_extension, format_from_extension
from chfmt.types import Format

__version__ = "0.0.1"
VERSION = f"v{__version__}"


def change_format(
    root: str | os.PathLike[str],
    src: Format | str = Format.JPEG,
    dst: Format | str = Format.PNG,
) -> ConversionResult:
    """Convert every ``src`` image below ``root`` into ``dst``.

    See ``chfmt.api.change_format``.
    """
    from .api import change_format as _impl

    return _impl(root, src=src, dst=dst)


__all__ = [
    "VERSION",
    "ConversionResult",
    "Format",
    "change_extension",
    "change_format",
    "format_from_extension",
]
