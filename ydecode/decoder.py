"""
yEnc part decoder and multi-part file assembly.
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

import io
import logging
from collections.abc import Iterable, Iterator
from typing import Protocol, Union

from .directive import (
    FOOTER,
    HEADER,
    PART_HEADER,
    parse_footer,
    parse_header,
    parse_part_header,
)
from .errors import (
    DecodeCancelledError,
    DuplicateSinglePartFileError,
    UnexpectedFilePartError,
    UnexpectedPartHeaderError,
    UnexpectedSinglePartFileError,
    YEncFormatError,
)
from .types import DecodedFile, DecodedPart, Header, PartHeader
from .yenc import DEFAULT_ENCODING, decode_line

__all__ = ["Decoder", "LineSource", "decode", "decode_part"]

log = logging.getLogger(__name__)

LineSource = Iterable[Union[bytes, str]]


class Cancel(Protocol):
    def is_set(self) -> bool: ...


class Decoder:
    """yEnc Decoder.

    Decodes yEnc articles (line sources) to binary data. A line source is any
    iterable of lines as bytes or strings, e.g. a list of lines or a file
    opened in binary mode. Line terminators are stripped.

    Decoding is strictly sequential. Sources are read one at a time and lines
    are read one at a time.
    """

    encoding = DEFAULT_ENCODING

    def __init__(
        self,
        encoding: Union[str, None] = None,
        cancel: Union[Cancel, None] = None,
    ) -> None:
        """Constructor for Decoder.

        Args:
            encoding: The single byte text encoding of the sources. Defaults
                to ISO-8859-1.
            cancel: An object with an `is_set()` method, for example a
                `threading.Event`. It is checked before each line is
                processed and before each part is written. When set decoding
                stops with a DecodeCancelledError.
        """
        if encoding is not None:
            self.encoding = encoding
        self.cancel = cancel

    def _check_cancel(self) -> None:
        if self.cancel is not None and self.cancel.is_set():
            raise DecodeCancelledError("Decoding cancelled")

    def _lines(self, source: LineSource) -> Iterator[bytes]:
        for line in source:
            self._check_cancel()
            if isinstance(line, str):
                line = line.encode(self.encoding)
            yield line.rstrip(b"\r\n")

    def _header(self, lines: Iterator[bytes]) -> Header:
        for line in lines:
            if line.startswith(HEADER):
                return parse_header(line.decode(self.encoding))
        raise YEncFormatError("No yEnc header found in input")

    def decode_part(self, source: LineSource) -> DecodedPart:
        """Decode a single yEnc article.

        Lines before the header are skipped. Decoding stops at the footer,
        any following lines are not read.

        Args:
            source: The encoded lines.

        Returns:
            The decoded part. The footer has been validated against the
            header and the decoded data.

        Raises:
            YEncFormatError: If there is no header or footer, or data is
                found before the part header of a file part.
            YEncParseError: If a header, part header or footer field is
                invalid.
            UnexpectedPartHeaderError: If a part header is found in a
                single-part file.
            YEncMismatchError: If the footer fails validation.
            DecodeCancelledError: If decoding is cancelled.
        """
        lines = self._lines(source)
        header = self._header(lines)
        is_part = header.part is not None

        # file parts are buffered once the part header is found, the declared
        # sizes are only checked against the footer
        data: Union[bytearray, None] = None if is_part else bytearray()
        part_header: Union[PartHeader, None] = None

        for line in lines:
            if line.startswith(PART_HEADER):
                if not is_part:
                    raise UnexpectedPartHeaderError("Unexpected part header")
                part_header = parse_part_header(line.decode(self.encoding))
                data = bytearray()
                continue

            if line.startswith(FOOTER):
                footer = parse_footer(line.decode(self.encoding))
                if data is None:
                    raise YEncFormatError("Missing yEnc part header")
                footer.validate(header, data)
                return DecodedPart(header, part_header, footer, bytes(data))

            if data is None:
                raise YEncFormatError("Data before yEnc part header")
            data += decode_line(line)

        raise YEncFormatError("Missing yEnc trailer")

    def decode(self, sources: Iterable[LineSource]) -> Union[DecodedFile, None]:
        """Decode and assemble a file from one or more yEnc articles.

        A file is either a single single-part article or any number of file
        part articles. File parts are written at their offset so they can be
        given in any order.

        Args:
            sources: The encoded articles.

        Returns:
            The decoded file with the name from the first header, or None if
            there were no sources.

        Raises:
            UnexpectedFilePartError: If a file part follows a single-part
                file.
            UnexpectedSinglePartFileError: If a single-part file follows a
                file part.
            DuplicateSinglePartFileError: If there is more than one
                single-part file.

        Note:
            Any error raised by decode_part() is also raised.
        """
        name: Union[str, None] = None
        output: Union[io.BytesIO, None] = None
        found_file_part = False
        found_single_part = False

        for source in sources:
            self._check_cancel()
            part = self.decode_part(source)

            if name is None:
                name = part.header.name

            self._check_cancel()
            if part.is_file_part:
                if found_single_part:
                    raise UnexpectedFilePartError("Unexpected file part.")
                found_file_part = True
                if output is None:
                    output = io.BytesIO()
                output.seek(part.offset)
                output.write(part.data)
                log.debug(
                    "%s: wrote part %d (%d bytes at %d)",
                    name,
                    part.header.part,
                    len(part.data),
                    part.offset,
                )
            else:
                if found_file_part:
                    raise UnexpectedSinglePartFileError("Unexpected single-part file.")
                if found_single_part:
                    raise DuplicateSinglePartFileError(
                        "Unexpected second single-part file."
                    )
                found_single_part = True
                output = io.BytesIO(part.data)
                log.debug("%s: single-part file (%d bytes)", name, len(part.data))

        if output is None or name is None:
            return None

        output.seek(0)
        return DecodedFile(name, output)


def decode_part(
    source: LineSource,
    encoding: str = DEFAULT_ENCODING,
    cancel: Union[Cancel, None] = None,
) -> DecodedPart:
    """Decode a single yEnc article. See Decoder.decode_part()."""
    return Decoder(encoding, cancel).decode_part(source)


def decode(
    sources: Iterable[LineSource],
    encoding: str = DEFAULT_ENCODING,
    cancel: Union[Cancel, None] = None,
) -> Union[DecodedFile, None]:
    """Decode and assemble a file from yEnc articles. See Decoder.decode()."""
    return Decoder(encoding, cancel).decode(sources)
