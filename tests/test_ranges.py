"""Tests for Range header parsing."""

import pytest

from media_server.errors import MalformedRange, Unsatisfiable
from media_server.streaming.ranges import ByteRange, parse_range


@pytest.mark.parametrize("header", [None, ""])
def test_no_header_means_full_file(header):
    assert parse_range(header, 100) is None


def test_closed_range():
    byte_range = parse_range("bytes=10-19", 100)
    assert byte_range == ByteRange(start=10, end=19)
    assert byte_range.length == 10
    assert byte_range.content_range(100) == "bytes 10-19/100"


def test_open_ended_range_runs_to_last_byte():
    assert parse_range("bytes=90-", 100) == ByteRange(start=90, end=99)


def test_single_byte_range():
    assert parse_range("bytes=0-0", 1) == ByteRange(start=0, end=0)


def test_surrounding_whitespace_ignored():
    assert parse_range("  bytes=0-4 ", 10) == ByteRange(start=0, end=4)


@pytest.mark.parametrize(
    "header",
    [
        "bytes=-10",  # suffix form
        "bytes=0-1,5-6",  # multi-range
        "bytes=5",
        "bytes 0-5",
        "bits=0-5",
        "bytes=0x10-",
        "bytes=١-٢",  # non-ASCII digits
    ],
)
def test_malformed(header):
    with pytest.raises(MalformedRange) as excinfo:
        parse_range(header, 100)
    assert excinfo.value.file_size == 100
    assert excinfo.value.status_code == 416


@pytest.mark.parametrize(
    "header,size",
    [
        ("bytes=100-", 100),  # start at size
        ("bytes=100-110", 100),
        ("bytes=0-100", 100),  # end not clamped
        ("bytes=50-40", 100),  # inverted
        ("bytes=0-", 0),  # empty file has no satisfiable range
    ],
)
def test_unsatisfiable(header, size):
    with pytest.raises(Unsatisfiable) as excinfo:
        parse_range(header, size)
    assert excinfo.value.file_size == size


@pytest.mark.parametrize(
    "header",
    [
        "bytes=" + "9" * 5000 + "-",
        "bytes=0-" + "9" * 5000,
    ],
)
def test_offsets_too_long_to_convert(header):
    with pytest.raises(Unsatisfiable) as excinfo:
        parse_range(header, 100)
    assert excinfo.value.file_size == 100
