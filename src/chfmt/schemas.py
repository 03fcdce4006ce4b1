"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, DirectoryPath, field_validator

from chfmt.types import Format


class ChangeFormatConfig(BaseModel):
    """Validated input for a tree conversion."""

    model_config = ConfigDict(extra="forbid")

    root: DirectoryPath
    src: Format = Format.JPEG
    dst: Format = Format.PNG

    @field_validator("src", "dst", mode="before")
    @classmethod
    def _parse_format(cls, value: object) -> Format:
        if not isinstance(value, str):
            raise ValueError("format must be a string.")
        return Format.parse(value)
