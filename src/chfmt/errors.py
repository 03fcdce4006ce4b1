"""Exception hierarchy and process exit codes."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes returned by the ``chfmt`` command."""

    OK = 0
    PARSE_FLAG_ERROR = 10
    TOO_MANY_ARGS = 11
    # Reserved; extension/content mismatches are skipped instead.
    INVALID_EXTENSION = 12
    FAILED_TO_GET_CWD = 13
    FAILED_TO_EXEC = 14


class ChfmtError(Exception):
    """Base class for all errors raised by chfmt."""

    exit_code: int = ExitCode.FAILED_TO_EXEC


class FlagParseError(ChfmtError):
    """Command-line flags could not be parsed."""

    exit_code = ExitCode.PARSE_FLAG_ERROR


class TooManyArgumentsError(ChfmtError):
    """More positional arguments were given than the command accepts."""

    exit_code = ExitCode.TOO_MANY_ARGS


class WorkingDirectoryError(ChfmtError):
    """The current working directory could not be resolved."""

    exit_code = ExitCode.FAILED_TO_GET_CWD


class ConversionError(ChfmtError):
    """A tree conversion failed."""

    exit_code = ExitCode.FAILED_TO_EXEC


class DecodeError(ConversionError):
    """Image data is corrupt or not in a supported encoding."""


class EncodeError(ConversionError):
    """The codec library failed to write an image."""


class UnsupportedFormatError(ConversionError):
    """No codec is registered for the requested format."""


class FileSystemError(ConversionError):
    """Opening, creating, listing or closing a file failed."""
