"""
yEnc decoding errors.
Copyright (C) 2013-2024  Byron Platt

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <http://www.gnu.org/licenses/>.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ChecksumMismatchError",
    "DecodeCancelledError",
    "DuplicateSinglePartFileError",
    "PartMismatchError",
    "SizeMismatchError",
    "UnexpectedFilePartError",
    "UnexpectedPartHeaderError",
    "UnexpectedSinglePartFileError",
    "YEncError",
    "YEncFormatError",
    "YEncMismatchError",
    "YEncParseError",
    "YEncSequenceError",
]


class YEncError(Exception):
    """Base class for all yEnc errors."""


class YEncFormatError(YEncError):
    """yEnc format error.

    Raised when an encoded source is not shaped like a yEnc article, for
    example when it has no header line.
    """


class YEncParseError(YEncError, ValueError):
    """yEnc directive field error.

    Raised when a field of a header, part header or footer line is missing
    or cannot be converted.
    """

    def __init__(self, field: str, value: str | None = None) -> None:
        """Directive field error.

        Args:
            field: The name of the offending field.
            value: The raw value of the field, None if it was missing.
        """
        self.field = field
        self.value = value
        super().__init__(field, value)

    def __str__(self) -> str:
        if self.value is None:
            return f"Missing field: {self.field}"
        return f"Invalid field: {self.field}={self.value}"


class UnexpectedPartHeaderError(YEncError):
    """Raised when a part header is found in a single-part source."""


class YEncMismatchError(YEncError):
    """Footer metadata disagrees with the header or the decoded data."""

    label = "Value"

    def __init__(self, expected: Any, actual: Any) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(expected, actual)

    def __str__(self) -> str:
        return f"{self.label} mismatch. Expected {self.expected}, but got {self.actual}."


class PartMismatchError(YEncMismatchError):
    label = "Part"


class SizeMismatchError(YEncMismatchError):
    label = "Size"


class ChecksumMismatchError(YEncMismatchError):
    label = "Checksum"

    def __str__(self) -> str:
        return (
            f"{self.label} mismatch. "
            f"Expected {self.expected:08x}, but got {self.actual:08x}."
        )


class YEncSequenceError(YEncError):
    """yEnc sequence error.

    Sequence errors are raised when single-part and multi-part sources are
    mixed while assembling a file.
    """


class UnexpectedFilePartError(YEncSequenceError):
    """Raised when a file part follows a single-part file."""


class UnexpectedSinglePartFileError(YEncSequenceError):
    """Raised when a single-part file follows a file part."""


class DuplicateSinglePartFileError(YEncSequenceError):
    """Raised when a second single-part file is found."""


class DecodeCancelledError(YEncError):
    """Raised when decoding is cancelled by the caller."""
