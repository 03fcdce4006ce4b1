"""Mapping between file extensions and format tags."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TypeVar

from chfmt.types import Format

P = TypeVar("P", str, Path)

_EXTENSION_FORMATS: dict[str, Format] = {
    ".jpg": Format.JPEG,
    ".jpeg": Format.JPEG,
    ".png": Format.PNG,
    ".gif": Format.GIF,
}


def format_from_extension(path: str | os.PathLike[str]) -> Format:
    """Return the format tag implied by a path's extension.

    The lookup is case-insensitive, so ``IMG.JPG`` and ``img.jpeg`` both map
    to ``Format.JPEG``. No I/O is performed.
    """
    _, ext = os.path.splitext(os.fspath(path))
    return _EXTENSION_FORMATS.get(ext.lower(), Format.UNKNOWN)


def change_extension(path: P, target: Format | str) -> P:
    """Replace the extension of ``path`` with ``.<target>``.

    Parameters
    ----------
    path : str | Path
        Original file path.
    target : Format | str
        Destination format tag or name.

    Returns
    -------
    str | Path
        The rewritten path, of the same kind as ``path``. Unchanged when
        ``target`` is ``Format.UNKNOWN``.
    """
    target = Format.parse(target)
    if target is Format.UNKNOWN:
        return path
    root, _ = os.path.splitext(os.fspath(path))
    changed = f"{root}.{target.value}"
    if isinstance(path, Path):
        return type(path)(changed)
    return changed
