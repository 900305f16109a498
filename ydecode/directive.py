"""
yEnc header, part header and footer parsing.
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

import logging
from collections.abc import Callable, Mapping
from typing import TypeVar

from .crc import parse_crc32
from .errors import YEncParseError
from .types import Footer, Header, PartHeader

__all__ = [
    "FOOTER",
    "HEADER",
    "PART_HEADER",
    "parse_directive",
    "parse_footer",
    "parse_header",
    "parse_part_header",
]

log = logging.getLogger(__name__)

HEADER = b"=ybegin"
PART_HEADER = b"=ypart"
FOOTER = b"=yend"

NAME = "name"
SIZE = "size"
LINE = "line"
PART = "part"
TOTAL = "total"
BEGIN = "begin"
END = "end"
CRC32 = "crc32"
PART_CRC32 = "pcrc32"

T = TypeVar("T")


def parse_directive(line: str) -> dict[str, str]:
    """Parse a yEnc directive line to a dictionary.

    Args:
        line: A header, part header or footer line including the leading
            tag (`=ybegin`, `=ypart` or `=yend`).

    Returns:
        A dictionary of field names to raw string values. Tokens that are
        not `key=value` pairs are skipped.

    Note:
        The name field is always the last field of a header line and can
        contain spaces, its value is everything after the first `name=`.
    """
    fields: dict[str, str] = {}
    head, sep, name = line.partition(f"{NAME}=")
    if sep:
        fields[NAME] = name.strip()
    # the first token is the tag
    for token in head.split()[1:]:
        parts = token.split("=")
        if len(parts) < 2:
            continue
        fields[parts[0]] = parts[1]
    return fields


def _convert(key: str, value: str, convert: Callable[[str], T]) -> T:
    try:
        return convert(value)
    except ValueError:
        raise YEncParseError(key, value) from None


def _field(
    fields: Mapping[str, str], key: str, convert: Callable[[str], T]
) -> T | None:
    """Get an optional field and convert it.

    Raises:
        YEncParseError: If the conversion fails.
    """
    value = fields.get(key)
    if value is None:
        return None
    return _convert(key, value, convert)


def _required(fields: Mapping[str, str], key: str, convert: Callable[[str], T]) -> T:
    """Get a required field and convert it.

    Raises:
        YEncParseError: If the field is missing or the conversion fails.
    """
    value = fields.get(key)
    if value is None:
        raise YEncParseError(key)
    return _convert(key, value, convert)


def _int(minimum: int) -> Callable[[str], int]:
    def convert(value: str) -> int:
        i = int(value)
        if i < minimum:
            raise ValueError(f"{i} is less than {minimum}")
        return i

    return convert


def _name(value: str) -> str:
    if not value:
        raise ValueError("Empty name")
    return value


def parse_header(line: str) -> Header:
    """Parse a `=ybegin` line.

    Raises:
        YEncParseError: If name, size or line is missing or a field is
            invalid.
    """
    fields = parse_directive(line)
    log.debug("header %r", fields)
    return Header(
        name=_required(fields, NAME, _name),
        size=_required(fields, SIZE, _int(0)),
        line=_required(fields, LINE, _int(1)),
        part=_field(fields, PART, _int(1)),
        total=_field(fields, TOTAL, _int(1)),
    )


def parse_part_header(line: str) -> PartHeader:
    """Parse a `=ypart` line.

    Raises:
        YEncParseError: If begin or end is missing or invalid.
    """
    fields = parse_directive(line)
    log.debug("part header %r", fields)
    begin = _required(fields, BEGIN, _int(1))
    end = _required(fields, END, _int(begin))
    return PartHeader(begin, end)


def parse_footer(line: str) -> Footer:
    """Parse a `=yend` line.

    Raises:
        YEncParseError: If size is missing or a field is invalid.
    """
    fields = parse_directive(line)
    log.debug("footer %r", fields)
    return Footer(
        size=_required(fields, SIZE, _int(0)),
        part=_field(fields, PART, _int(1)),
        crc32=_field(fields, CRC32, parse_crc32),
        pcrc32=_field(fields, PART_CRC32, parse_crc32),
    )
