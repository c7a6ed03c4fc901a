"""Display constants for inodeinspect."""

from inodeinspect.models import EntryType

VERSION = "0.1.0"

HUMAN_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Checked from largest to smallest
SIZE_UNITS: tuple[tuple[int, str], ...] = (
    (1 << 30, "GB"),
    (1 << 20, "MB"),
    (1 << 10, "KB"),
)

TYPE_GLYPHS: dict[EntryType, str] = {
    EntryType.DIRECTORY: "d",
    EntryType.SYMLINK: "l",
    EntryType.REGULAR_FILE: "-",
    EntryType.CHAR_DEVICE: "c",
    EntryType.BLOCK_DEVICE: "b",
    EntryType.FIFO: "p",
    EntryType.SOCKET: "s",
    EntryType.UNKNOWN: "?",
}

TYPE_LABELS: dict[EntryType, str] = {
    EntryType.DIRECTORY: "directory",
    EntryType.REGULAR_FILE: "regular file",
    EntryType.SYMLINK: "symbolic link",
    EntryType.CHAR_DEVICE: "character device",
    EntryType.BLOCK_DEVICE: "block device",
    EntryType.FIFO: "FIFO",
    EntryType.SOCKET: "socket",
    EntryType.UNKNOWN: "unknown",
}

# Owner, group, other; each as read, write, execute
PERMISSION_FLAGS: tuple[tuple[int, str], ...] = (
    (0o400, "r"),
    (0o200, "w"),
    (0o100, "x"),
    (0o040, "r"),
    (0o020, "w"),
    (0o010, "x"),
    (0o004, "r"),
    (0o002, "w"),
    (0o001, "x"),
)
