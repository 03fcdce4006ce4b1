"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

import os
from pathlib import Path

from chfmt.application.results import ConversionResult
from chfmt.application.use_cases import build_conversion_request
from chfmt.application.use_cases import change_format as _change_format
from chfmt.types import Format


def change_format(
    root: str | os.PathLike[str],
    src: Format | str = Format.JPEG,
    dst: Format | str = Format.PNG,
) -> ConversionResult:
    """Convert every ``src`` image below ``root`` into ``dst``.

    Outputs are written next to their sources with the extension replaced
    (``a/b.jpg`` becomes ``a/b.png``); existing files are overwritten.

    Parameters
    ----------
    root : str | os.PathLike
        Directory to walk recursively.
    src : Format | str, default="jpeg"
        Encoding of the files to convert.
    dst : Format | str, default="png"
        Encoding to write.

    Returns
    -------
    ConversionResult
        Converted and skipped files.

    Raises
    ------
    ConversionError
        On the first file that cannot be read, decoded, encoded or written.
    """
    request = build_conversion_request(root=Path(root), src=src, dst=dst)
    return _change_format(request=request)
