"""Display formatting for sizes and timestamps."""

from datetime import datetime

SIZE_UNITS = ['B', 'KB', 'MB', 'GB', 'TB']


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count with 1024-based units and one decimal place.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "0 B", "1.5 KB", "1.0 GB")
    """
    if size_bytes <= 0:
        return "0 B"

    # integer powers: log(2**30, 1024) is not exactly 3.0
    index = 0
    while size_bytes >= 1024 ** (index + 1) and index < len(SIZE_UNITS) - 1:
        index += 1
    size = size_bytes / 1024 ** index
    return f"{size:.1f} {SIZE_UNITS[index]}"


def format_date(iso_date: str, locale: str = "ja") -> str:
    """
    Format an ISO-8601 timestamp in local time for display.

    Unparsable input is returned unchanged.
    """
    try:
        value = datetime.fromisoformat(iso_date.replace('Z', '+00:00'))
    except (AttributeError, ValueError):
        return iso_date

    if value.tzinfo is not None:
        value = value.astimezone()

    if locale == "ja":
        return f"{value.year}年{value.month}月{value.day}日 {value:%H:%M}"
    return f"{value:%b} {value.day}, {value.year}, {value:%H:%M}"
