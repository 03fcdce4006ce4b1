"""Application use-cases orchestrating tree conversion."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import IO

from pydantic import ValidationError

from chfmt.application.options import ConversionRequest
from chfmt.application.ports import CodecProvider
from chfmt.application.results import ConversionResult
from chfmt.codecs.registry import create_default_registry
from chfmt.errors import ConversionError, FileSystemError
from chfmt.formats import change_extension, format_from_extension
from chfmt.schemas import ChangeFormatConfig
from chfmt.types import Format

logger = logging.getLogger(__name__)


def build_conversion_request(
    *,
    root: Path,
    src: Format | str = Format.JPEG,
    dst: Format | str = Format.PNG,
) -> ConversionRequest:
    """Validate raw parameters into a ``ConversionRequest``.

    Raises
    ------
    ConversionError
        If ``root`` is not an existing directory.
    """
    try:
        config = ChangeFormatConfig(root=root, src=src, dst=dst)
    except ValidationError as exc:
        raise ConversionError(f"Invalid conversion parameters: {exc}") from exc
    return ConversionRequest(root=config.root, src=config.src, dst=config.dst)


def change_format(
    *,
    request: ConversionRequest,
    codecs: CodecProvider | None = None,
) -> ConversionResult:
    """Use-case: convert every ``src`` image below ``request.root`` to ``dst``.

    The walk stops at the first error, which propagates to the caller.
    Files whose decoded content does not match ``src`` are skipped.
    """
    codecs = codecs or create_default_registry()
    converted: list[tuple[Path, Path]] = []
    skipped: list[Path] = []

    if request.src is Format.UNKNOWN:
        logger.warning("source format is not a supported image format; nothing to convert")
        return ConversionResult(root=request.root, src=request.src, dst=request.dst)

    for path in iter_files(request.root):
        if format_from_extension(path) is not request.src:
            continue
        dst_path = _convert_file(path, request, codecs)
        if dst_path is None:
            logger.debug("skipping %s: content is not %s", path, request.src)
            skipped.append(path)
            continue
        logger.debug("converted %s -> %s", path, dst_path)
        converted.append((path, dst_path))

    return ConversionResult(
        root=request.root,
        src=request.src,
        dst=request.dst,
        converted=tuple(converted),
        skipped=tuple(skipped),
    )


def iter_files(root: Path) -> Iterator[Path]:
    """Yield every non-directory entry below ``root``.

    Within a directory, files come before subdirectories, each sorted by
    name. Symlinked directories are not descended into.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            yield Path(dirpath, name)


def _raise_walk_error(exc: OSError) -> None:
    raise FileSystemError(
        f"Failed to read directory {exc.filename}: {exc.strerror}"
    ) from exc


def _convert_file(
    path: Path,
    request: ConversionRequest,
    codecs: CodecProvider,
) -> Path | None:
    """Convert one file, returning the written path or ``None`` if skipped."""
    try:
        source = path.open("rb")
    except OSError as exc:
        raise FileSystemError(f"Failed to open {path}: {exc.strerror}") from exc
    with source:
        image, detected = codecs.decode(source)

    if detected is not request.src:
        return None

    # Resolve before creating the destination: with an unknown target the
    # destination path is the source path itself.
    codec = codecs.get(request.dst)
    dst_path = change_extension(path, request.dst)
    try:
        handle = dst_path.open("wb")
    except OSError as exc:
        raise FileSystemError(f"Failed to create {dst_path}: {exc.strerror}") from exc

    try:
        codec.encode(handle, image)
    except BaseException:
        _close_after_error(handle)
        raise
    try:
        handle.close()
    except OSError as exc:
        raise FileSystemError(f"Failed to close {dst_path}: {exc.strerror}") from exc
    return dst_path


def _close_after_error(handle: IO[bytes]) -> None:
    """Close ``handle`` while an earlier exception is already propagating."""
    try:
        handle.close()
    except OSError:
        logger.debug("close of %s failed after an earlier error", handle.name, exc_info=True)
