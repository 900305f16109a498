"""
CRC32 checksums for yEnc payloads.
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

import binascii
import re
import struct
import zlib

__all__ = ["crc32", "parse_crc32"]


_crc32_re = re.compile("[0-9a-fA-F]{1,8}")


def crc32(data: bytes, value: int = 0) -> int:
    """Calculate the CRC-32/IEEE checksum of data.

    Args:
        data: The bytes to checksum.
        value: A previous checksum to continue from. Defaults to 0 (a new
            checksum).

    Returns:
        The checksum as an unsigned 32-bit integer.
    """
    return zlib.crc32(data, value) & 0xFFFFFFFF


def parse_crc32(value: str) -> int:
    """Parse a hex encoded CRC32 value as found in a yEnc footer.

    Raises:
        ValueError: If the value is not 1 to 8 hex digits.
    """
    if not _crc32_re.fullmatch(value):
        raise ValueError(f"Invalid CRC32: {value!r}")
    buf = binascii.unhexlify(value.zfill(8))
    return struct.unpack(">I", buf)[0]  # type: ignore[no-any-return]
