import pytest

from ydecode.directive import (
    parse_directive,
    parse_footer,
    parse_header,
    parse_part_header,
)
from ydecode.errors import YEncParseError
from ydecode.types import Footer, Header, PartHeader


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (
            "=ybegin line=128 size=123456 name=mybinary.dat",
            {"line": "128", "size": "123456", "name": "mybinary.dat"},
        ),
        (
            "=ybegin part=1 line=128 size=500000 name=my big file.jpg ",
            {"part": "1", "line": "128", "size": "500000", "name": "my big file.jpg"},
        ),
        (
            "=ybegin line=128 size=10 name=a name=b.txt",
            {"line": "128", "size": "10", "name": "a name=b.txt"},
        ),
        ("=ypart begin=1 end=100000", {"begin": "1", "end": "100000"}),
        (
            "=yend size=100000 part=1 pcrc32=abcdef12",
            {"size": "100000", "part": "1", "pcrc32": "abcdef12"},
        ),
        ("=yend  size=5   junk crc32=3610a686", {"size": "5", "crc32": "3610a686"}),
        ("=yend", {}),
        ("", {}),
    ],
)
def test_parse_directive(line: str, expected: dict) -> None:
    assert parse_directive(line) == expected


def test_parse_header() -> None:
    header = parse_header("=ybegin line=128 size=584 name=testfile.txt")
    assert header == Header("testfile.txt", 584, 128)
    assert header.part is None
    assert header.total is None


def test_parse_header_part() -> None:
    header = parse_header("=ybegin part=2 total=3 line=128 size=19338 name=joy stick.jpg")
    assert header == Header("joy stick.jpg", 19338, 128, 2, 3)


@pytest.mark.parametrize(
    ("line", "field"),
    [
        ("=ybegin line=128 size=584", "name"),
        ("=ybegin line=128 size=584 name=", "name"),
        ("=ybegin line=128 name=a.txt", "size"),
        ("=ybegin size=584 name=a.txt", "line"),
        ("=ybegin line=128 size=abc name=a.txt", "size"),
        ("=ybegin line=128 size=-1 name=a.txt", "size"),
        ("=ybegin line=0 size=584 name=a.txt", "line"),
        ("=ybegin part=0 line=128 size=584 name=a.txt", "part"),
        ("=ybegin part=1 total=x line=128 size=584 name=a.txt", "total"),
    ],
)
def test_parse_header_invalid(line: str, field: str) -> None:
    with pytest.raises(YEncParseError) as excinfo:
        parse_header(line)
    assert excinfo.value.field == field


def test_parse_error_message() -> None:
    with pytest.raises(ValueError, match="Invalid field: size=abc"):
        parse_header("=ybegin line=128 size=abc name=a.txt")
    with pytest.raises(ValueError, match="Missing field: line"):
        parse_header("=ybegin size=1 name=a.txt")


def test_parse_part_header() -> None:
    part_header = parse_part_header("=ypart begin=11251 end=19338")
    assert part_header == PartHeader(11251, 19338)
    assert part_header.length == 8088


@pytest.mark.parametrize(
    ("line", "field"),
    [
        ("=ypart end=100", "begin"),
        ("=ypart begin=1", "end"),
        ("=ypart begin=0 end=100", "begin"),
        ("=ypart begin=100 end=99", "end"),
    ],
)
def test_parse_part_header_invalid(line: str, field: str) -> None:
    with pytest.raises(YEncParseError) as excinfo:
        parse_part_header(line)
    assert excinfo.value.field == field


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("=yend size=584", Footer(584)),
        ("=yend size=584 crc32=ded29f4f", Footer(584, crc32=0xDED29F4F)),
        (
            "=yend size=11250 part=1 pcrc32=bfae5c0b",
            Footer(11250, part=1, pcrc32=0xBFAE5C0B),
        ),
        (
            "=yend size=8088 part=2 pcrc32=aca76043 crc32=f6acc027",
            Footer(8088, 2, 0xF6ACC027, 0xACA76043),
        ),
    ],
)
def test_parse_footer(line: str, expected: Footer) -> None:
    assert parse_footer(line) == expected


@pytest.mark.parametrize(
    ("line", "field"),
    [
        ("=yend crc32=ded29f4f", "size"),
        ("=yend size=584 crc32=nothex", "crc32"),
        ("=yend size=584 pcrc32=123456789", "pcrc32"),
        ("=yend size=584 part=one", "part"),
    ],
)
def test_parse_footer_invalid(line: str, field: str) -> None:
    with pytest.raises(YEncParseError) as excinfo:
        parse_footer(line)
    assert excinfo.value.field == field
