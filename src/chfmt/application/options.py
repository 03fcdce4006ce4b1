"""Typed request objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from chfmt.types import Format


@dataclass(frozen=True)
class ConversionRequest:
    """One tree conversion: where to look, what to read, what to write."""

    root: Path
    src: Format = Format.JPEG
    dst: Format = Format.PNG
