"""File system operations: metadata lookup and directory traversal."""

import os
import stat
import sys
from collections.abc import Callable

from inodeinspect.models import (
    DirectoryOpenFailedError,
    EntryType,
    MetadataRecord,
    NotAccessibleError,
    RenderOptions,
    WalkStats,
)

_TYPE_PREDICATES: tuple[tuple[Callable[[int], bool], EntryType], ...] = (
    (stat.S_ISDIR, EntryType.DIRECTORY),
    (stat.S_ISLNK, EntryType.SYMLINK),
    (stat.S_ISREG, EntryType.REGULAR_FILE),
    (stat.S_ISCHR, EntryType.CHAR_DEVICE),
    (stat.S_ISBLK, EntryType.BLOCK_DEVICE),
    (stat.S_ISFIFO, EntryType.FIFO),
    (stat.S_ISSOCK, EntryType.SOCKET),
)


def classify_mode(mode: int) -> EntryType:
    """Determine the entry type from a raw ``st_mode``.

    Args:
        mode: Mode value as returned by ``os.lstat``

    Returns:
        The single matching EntryType, or ``EntryType.UNKNOWN`` when no
        predicate (or more than one) matches

    Examples:
        >>> classify_mode(0o040755)
        <EntryType.DIRECTORY: 'directory'>
    """
    matches = [entry_type for predicate, entry_type in _TYPE_PREDICATES if predicate(mode)]
    if len(matches) != 1:
        return EntryType.UNKNOWN
    return matches[0]


def read_metadata(path: str) -> MetadataRecord:
    """Read metadata for a single path without following symlinks.

    Args:
        path: File system path, absolute or relative

    Returns:
        MetadataRecord describing the entry as it is on disk right now

    Raises:
        NotAccessibleError: If the path is missing or cannot be stat'ed
    """
    try:
        st = os.lstat(path)
    except OSError as e:
        raise NotAccessibleError(path, e.strerror or str(e)) from e

    return MetadataRecord(
        path=path,
        inode_number=st.st_ino,
        entry_type=classify_mode(st.st_mode),
        permission_bits=stat.S_IMODE(st.st_mode) & 0o777,
        link_count=st.st_nlink,
        owner_id=st.st_uid,
        group_id=st.st_gid,
        size_bytes=st.st_size,
        access_time=st.st_atime_ns // 1_000_000_000,
        modification_time=st.st_mtime_ns // 1_000_000_000,
        status_change_time=st.st_ctime_ns // 1_000_000_000,
    )


def list_directory(directory_path: str) -> list[str]:
    """Return child names of a directory in listing order.

    ``os.scandir`` never yields the ``.`` and ``..`` entries. The handle is
    closed before returning, also when iteration fails part way.

    Raises:
        DirectoryOpenFailedError: If the directory cannot be opened or read
    """
    try:
        with os.scandir(directory_path) as entries:
            return [entry.name for entry in entries]
    except OSError as e:
        raise DirectoryOpenFailedError(directory_path, e.strerror or str(e)) from e


def report_unreadable(path: str, reason: str) -> None:
    """Print a per-entry stat failure to stderr."""
    print(f"Error getting file info for {path}: {reason}", file=sys.stderr)


def report_unopenable(path: str, reason: str) -> None:
    """Print a directory listing failure to stderr."""
    print(f"Error: Unable to open directory {path}: {reason}", file=sys.stderr)


def walk_directory(
    directory_path: str,
    options: RenderOptions,
    emit: Callable[[MetadataRecord], None],
) -> WalkStats:
    """Read every child of a directory and hand each record to ``emit``.

    Subdirectories are visited depth-first, after their own entry, when
    ``options.recursive`` is set. Children that cannot be read, and nested
    directories that cannot be listed, are reported on stderr and skipped.

    Args:
        directory_path: Directory to walk
        options: Render options; only ``recursive`` is consulted here
        emit: Callback receiving each successfully read record

    Returns:
        WalkStats with rendered and skipped counts for the whole walk

    Raises:
        DirectoryOpenFailedError: If ``directory_path`` itself cannot be listed
    """
    stats = WalkStats()
    for name in list_directory(directory_path):
        child_path = os.path.join(directory_path, name)
        try:
            record = read_metadata(child_path)
        except NotAccessibleError as e:
            report_unreadable(e.path, e.reason)
            stats += WalkStats(skipped=1)
            continue

        emit(record)
        stats += WalkStats(rendered=1)

        if options.recursive and record.entry_type is EntryType.DIRECTORY:
            try:
                stats += walk_directory(child_path, options, emit)
            except DirectoryOpenFailedError as e:
                report_unopenable(e.path, e.reason)
                stats += WalkStats(skipped=1)

    return stats
