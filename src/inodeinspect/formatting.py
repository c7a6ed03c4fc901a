"""Formatting helpers that turn raw metadata fields into display strings."""

import time

from inodeinspect.constants import (
    HUMAN_TIME_FORMAT,
    PERMISSION_FLAGS,
    SIZE_UNITS,
    TYPE_GLYPHS,
    TYPE_LABELS,
)
from inodeinspect.models import EntryType


def format_permissions(entry_type: EntryType, permission_bits: int) -> str:
    """Build an ``ls -l`` style permission string.

    Args:
        entry_type: Kind of the entry, selects the leading glyph
        permission_bits: Mode bits; only the low nine are used

    Returns:
        A 10 character string such as ``drwxr-xr-x``

    Examples:
        >>> format_permissions(EntryType.REGULAR_FILE, 0o644)
        '-rw-r--r--'
    """
    glyph = TYPE_GLYPHS.get(entry_type, "?")
    flags = "".join(char if permission_bits & bit else "-" for bit, char in PERMISSION_FLAGS)
    return glyph + flags


def format_time(timestamp: int, human_readable: bool) -> str:
    """Format an epoch timestamp.

    Human-readable output uses the local time zone, to the second. Times the
    platform cannot convert to a calendar date fall back to epoch seconds.
    """
    if human_readable:
        try:
            return time.strftime(HUMAN_TIME_FORMAT, time.localtime(timestamp))
        except (OverflowError, OSError, ValueError):
            pass
    return str(int(timestamp))


def format_size(size_bytes: int, human_readable: bool) -> str:
    """Format a byte count, scaling by 1024 when human readable.

    Args:
        size_bytes: Size in bytes
        human_readable: Whether to scale into KB/MB/GB

    Returns:
        Formatted string like "2.00 KB", "512 bytes" or "2048"
    """
    if not human_readable:
        return str(size_bytes)
    for threshold, unit in SIZE_UNITS:
        if size_bytes >= threshold:
            return f"{size_bytes / threshold:.2f} {unit}"
    return f"{size_bytes} bytes"


def entry_type_label(entry_type: EntryType) -> str:
    """Return the descriptive label for an entry type, e.g. "regular file"."""
    return TYPE_LABELS.get(entry_type, "unknown")
