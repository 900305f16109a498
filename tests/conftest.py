from __future__ import annotations

import zlib

import pytest

CRLF = b"\r\n"


def yenc_encode(data: bytes, line_length: int = 128) -> list[bytes]:
    """Encode data to yEnc lines (without terminators)."""
    lines: list[bytes] = []
    line = bytearray()
    for b in data:
        c = (b + 42) & 0xFF
        if c in {0x00, 0x0A, 0x0D, 0x3D}:
            line += bytes((0x3D, (c + 64) & 0xFF))
        else:
            line.append(c)
        if len(line) >= line_length:
            lines.append(bytes(line))
            line = bytearray()
    if line:
        lines.append(bytes(line))
    return lines


def single_part(name: str, data: bytes, crc32: int | None = None) -> list[bytes]:
    crc = zlib.crc32(data) if crc32 is None else crc32
    return [
        f"=ybegin line=128 size={len(data)} name={name}".encode("latin-1"),
        *yenc_encode(data),
        f"=yend size={len(data)} crc32={crc:08x}".encode("latin-1"),
    ]


def file_part(
    name: str, data: bytes, part: int, total: int, begin: int, end: int
) -> list[bytes]:
    chunk = data[begin - 1 : end]
    return [
        f"=ybegin part={part} total={total} line=128 size={len(data)} name={name}".encode(
            "latin-1"
        ),
        f"=ypart begin={begin} end={end}".encode("latin-1"),
        *yenc_encode(chunk),
        f"=yend size={len(chunk)} part={part} pcrc32={zlib.crc32(chunk):08x}".encode(
            "latin-1"
        ),
    ]


def article(lines: list[bytes]) -> bytes:
    """Join lines as they would be received in an article body."""
    return b"".join(line + CRLF for line in lines)


@pytest.fixture
def plain() -> bytes:
    # every byte value, including the ones that need escaping
    return bytes((i * 7 + 3) & 0xFF for i in range(20000))


@pytest.fixture
def testfile() -> bytes:
    return b"This is a test file.\r\nIt has two lines.\r\n" * 50


@pytest.fixture
def singlepart(testfile: bytes) -> list[bytes]:
    return single_part("testfile.txt", testfile)


@pytest.fixture
def multipart1(plain: bytes) -> list[bytes]:
    return file_part("joystick.jpg", plain, 1, 2, 1, 11250)


@pytest.fixture
def multipart2(plain: bytes) -> list[bytes]:
    return file_part("joystick.jpg", plain, 2, 2, 11251, 20000)
