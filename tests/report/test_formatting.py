"""Unit tests for size and time formatting."""

from datetime import datetime

import pytest

from project2md.report.formatting import format_bytes, format_generated, format_modified


@pytest.mark.parametrize(
    "size,expected",
    [
        (0, "0 B"),
        (1, "1 B"),
        (1023, "1023 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (2048, "2 KB"),
        (1048576, "1 MB"),
        (1234567, "1.18 MB"),
        (5 * 1024**3, "5 GB"),
        (1024**4, "1 TB"),
        (2048 * 1024**4, "2048 TB"),
    ],
)
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected


def test_format_modified_minute_precision():
    assert format_modified(datetime(2024, 1, 2, 3, 4, 59)) == "2024-01-02 03:04"


def test_format_modified_unknown():
    assert format_modified(None) is None


def test_format_generated_second_precision():
    assert format_generated(datetime(2024, 12, 31, 23, 59, 58)) == "2024-12-31 23:59:58"
