"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from chfmt.types import Format


@dataclass(frozen=True)
class ConversionResult:
    """Structured tree conversion outcome."""

    root: Path
    src: Format
    dst: Format
    converted: tuple[tuple[Path, Path], ...] = ()
    skipped: tuple[Path, ...] = ()
