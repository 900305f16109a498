"""
yEnc line decoder.
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

__all__ = ["DEFAULT_ENCODING", "decode_line"]


DEFAULT_ENCODING = "iso-8859-1"

_ESCAPE = 0x3D

# byte -> (byte - 42) & 0xFF
_TRANSLATE = bytes((b - 42) & 0xFF for b in range(256))


def decode_line(line: bytes | str, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Decode a single line of yEnc data.

    Args:
        line: An encoded line without its line terminator. A string is
            encoded to bytes using encoding first.
        encoding: A single byte text encoding.

    Returns:
        The decoded bytes.

    Note:
        Escape state does not carry over between lines. An escape marker at
        the end of a line is dropped.
    """
    if isinstance(line, str):
        line = line.encode(encoding)
    if _ESCAPE not in line:
        return line.translate(_TRANSLATE)
    data = bytearray()
    escape = False
    for b in line:
        if b == _ESCAPE and not escape:
            escape = True
            continue
        if escape:
            b = (b - 64) & 0xFF
            escape = False
        data.append((b - 42) & 0xFF)
    return bytes(data)
