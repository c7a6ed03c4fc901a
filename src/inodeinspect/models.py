"""Data models and exceptions for inodeinspect."""

import enum
from dataclasses import dataclass


class EntryType(enum.Enum):
    """Kind of filesystem node, derived from its mode bits."""

    DIRECTORY = "directory"
    REGULAR_FILE = "regular_file"
    SYMLINK = "symlink"
    CHAR_DEVICE = "char_device"
    BLOCK_DEVICE = "block_device"
    FIFO = "fifo"
    SOCKET = "socket"
    UNKNOWN = "unknown"


class OutputFormat(enum.Enum):
    """Output encoding selected with --format."""

    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class MetadataRecord:
    """Metadata snapshot for a single filesystem entry.

    Attributes:
        path: Path of the entry as it was reached during traversal
        inode_number: Filesystem-assigned inode number
        entry_type: Node kind, taken from the entry itself (links are not followed)
        permission_bits: The nine rwx bits for owner, group and other
        link_count: Number of hard links
        owner_id: Owner user id
        group_id: Owner group id
        size_bytes: Size in bytes, reported for every entry type
        access_time: Last access, whole seconds since the epoch
        modification_time: Last modification, whole seconds since the epoch
        status_change_time: Last status change, whole seconds since the epoch
    """

    path: str
    inode_number: int
    entry_type: EntryType
    permission_bits: int
    link_count: int
    owner_id: int
    group_id: int
    size_bytes: int
    access_time: int
    modification_time: int
    status_change_time: int


@dataclass(frozen=True)
class RenderOptions:
    """How records are rendered and whether directories are descended."""

    output_format: OutputFormat = OutputFormat.TEXT
    human_readable: bool = False
    recursive: bool = False


@dataclass(frozen=True)
class WalkStats:
    """Counts collected while walking a directory tree."""

    rendered: int = 0
    skipped: int = 0

    def __add__(self, other: "WalkStats") -> "WalkStats":
        return WalkStats(self.rendered + other.rendered, self.skipped + other.skipped)


class InspectError(Exception):
    """Base class for metadata lookup failures."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class NotAccessibleError(InspectError):
    """Raised when a path cannot be stat'ed (missing, permission denied, I/O error)."""


class DirectoryOpenFailedError(InspectError):
    """Raised when a directory cannot be listed."""
