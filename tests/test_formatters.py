"""Tests for size and date formatting."""

from datetime import datetime

import pytest

from console.formatters import format_date, format_file_size


@pytest.mark.parametrize(
    "size_bytes,expected",
    [
        (0, "0 B"),
        (1, "1.0 B"),
        (1023, "1023.0 B"),
        (1024, "1.0 KB"),
        (1536, "1.5 KB"),
        (1048576, "1.0 MB"),
        (1073741824, "1.0 GB"),
        (5 * 1024 ** 4, "5.0 TB"),
        (3 * 1024 ** 5, "3072.0 TB"),
    ],
)
def test_format_file_size(size_bytes, expected):
    assert format_file_size(size_bytes) == expected


def test_format_date_japanese():
    local = datetime(2024, 5, 1, 9, 30).astimezone()

    assert format_date(local.isoformat(), "ja") == "2024年5月1日 09:30"


def test_format_date_english():
    local = datetime(2024, 5, 1, 9, 30).astimezone()

    assert format_date(local.isoformat(), "en") == "May 1, 2024, 09:30"


def test_format_date_accepts_zulu_suffix():
    """Trailing 'Z' is parsed as UTC and shown in local time."""
    utc_value = datetime.fromisoformat("2024-05-01T09:30:00+00:00")
    expected = utc_value.astimezone()

    assert format_date("2024-05-01T09:30:00Z", "ja") == (
        f"{expected.year}年{expected.month}月{expected.day}日 {expected:%H:%M}"
    )


def test_format_date_invalid_returned_unchanged():
    assert format_date("not a date") == "not a date"
