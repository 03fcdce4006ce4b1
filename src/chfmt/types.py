"""Shared type definitions."""

from __future__ import annotations

from enum import Enum
from typing import BinaryIO

ImageStream = BinaryIO


class Format(str, Enum):
    """Logical image encoding tag."""

    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str | Format) -> Format:
        """Map a user-supplied format name onto a tag.

        Parameters
        ----------
        name : str | Format
            Format name such as ``"jpeg"``, ``"PNG"`` or ``"jpg"``.

        Returns
        -------
        Format
            Matching tag, or ``Format.UNKNOWN`` for unrecognised names.
        """
        if isinstance(name, Format):
            return name
        lowered = name.strip().lower()
        if lowered == "jpg":
            return cls.JPEG
        try:
            return cls(lowered)
        except ValueError:
            return cls.UNKNOWN
