from __future__ import annotations

import io
from typing import NamedTuple, Optional

from .crc import crc32
from .errors import ChecksumMismatchError, PartMismatchError, SizeMismatchError


class Header(NamedTuple):
    """Whole file metadata from a `=ybegin` line."""

    name: str
    size: int
    line: int
    part: Optional[int] = None
    total: Optional[int] = None


class PartHeader(NamedTuple):
    """1-based inclusive byte range from a `=ypart` line."""

    begin: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.begin + 1


class Footer(NamedTuple):
    """Size and checksums from a `=yend` line."""

    size: int
    part: Optional[int] = None
    crc32: Optional[int] = None
    pcrc32: Optional[int] = None

    def validate(self, header: Header, data: bytes) -> None:
        """Validate decoded data against the footer.

        Only the first available checksum is checked, the whole file crc32
        is preferred over the part pcrc32.

        Args:
            header: The header the footer terminates.
            data: The decoded data.

        Raises:
            PartMismatchError: If the footer and header part numbers differ.
            SizeMismatchError: If the footer size is not the data length.
            ChecksumMismatchError: If the checksum of the data is wrong.
        """
        if self.part != header.part:
            raise PartMismatchError(header.part, self.part)
        if self.size != len(data):
            raise SizeMismatchError(self.size, len(data))
        expected = self.crc32 if self.crc32 is not None else self.pcrc32
        if expected is None:
            return
        actual = crc32(data)
        if actual != expected:
            raise ChecksumMismatchError(expected, actual)


class DecodedPart(NamedTuple):
    header: Header
    part_header: Optional[PartHeader]
    footer: Footer
    data: bytes

    @property
    def is_file_part(self) -> bool:
        return self.header.part is not None

    @property
    def offset(self) -> int:
        """Offset of the data within the whole file."""
        if self.is_file_part and self.part_header is not None:
            return self.part_header.begin - 1
        return 0


class DecodedFile(NamedTuple):
    """An assembled file, data is positioned at the start."""

    name: str
    data: io.BytesIO

    @property
    def size(self) -> int:
        with self.data.getbuffer() as view:
            return view.nbytes
