from .crc import crc32
from .decoder import Decoder, LineSource, decode, decode_part
from .directive import parse_directive, parse_footer, parse_header, parse_part_header
from .errors import (
    ChecksumMismatchError,
    DecodeCancelledError,
    DuplicateSinglePartFileError,
    PartMismatchError,
    SizeMismatchError,
    UnexpectedFilePartError,
    UnexpectedPartHeaderError,
    UnexpectedSinglePartFileError,
    YEncError,
    YEncFormatError,
    YEncMismatchError,
    YEncParseError,
    YEncSequenceError,
)
from .types import DecodedFile, DecodedPart, Footer, Header, PartHeader
from .yenc import DEFAULT_ENCODING, decode_line

__all__ = [
    "DEFAULT_ENCODING",
    "ChecksumMismatchError",
    "DecodeCancelledError",
    "DecodedFile",
    "DecodedPart",
    "Decoder",
    "DuplicateSinglePartFileError",
    "Footer",
    "Header",
    "LineSource",
    "PartHeader",
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
    "crc32",
    "decode",
    "decode_line",
    "decode_part",
    "parse_directive",
    "parse_footer",
    "parse_header",
    "parse_part_header",
]
