"""Text and JSON output generation, plus the top-level inspect operations."""

import json
import sys
from typing import TextIO

from inodeinspect.file_operations import (
    read_metadata,
    report_unopenable,
    report_unreadable,
    walk_directory,
)
from inodeinspect.formatting import (
    entry_type_label,
    format_permissions,
    format_size,
    format_time,
)
from inodeinspect.models import (
    DirectoryOpenFailedError,
    MetadataRecord,
    NotAccessibleError,
    OutputFormat,
    RenderOptions,
    WalkStats,
)


def build_json_object(record: MetadataRecord, human_readable: bool) -> dict:
    """Build the JSON-ready mapping for a record.

    Key order is fixed. ``number``, ``linkCount``, ``uid`` and ``gid`` stay
    integers; every other value is a display string.
    """
    return {
        "filePath": record.path,
        "inode": {
            "number": record.inode_number,
            "type": entry_type_label(record.entry_type),
            "permissions": format_permissions(record.entry_type, record.permission_bits),
            "linkCount": record.link_count,
            "uid": record.owner_id,
            "gid": record.group_id,
            "size": format_size(record.size_bytes, human_readable),
            "accessTime": format_time(record.access_time, human_readable),
            "modificationTime": format_time(record.modification_time, human_readable),
            "statusChangeTime": format_time(record.status_change_time, human_readable),
        },
    }


def generate_json(record: MetadataRecord, human_readable: bool) -> str:
    """Generate one self-contained JSON document for a record.

    Args:
        record: Metadata to render
        human_readable: Whether sizes and times are scaled / calendar formatted

    Returns:
        JSON text terminated by a newline
    """
    return json.dumps(build_json_object(record, human_readable), indent=2) + "\n"


def generate_text(record: MetadataRecord, human_readable: bool) -> str:
    """Generate the labelled, one-field-per-line text block for a record.

    Args:
        record: Metadata to render
        human_readable: Whether sizes and times are scaled / calendar formatted

    Returns:
        Text block terminated by a newline
    """
    lines = [
        f"Information for {record.path}:",
        f"File Inode: {record.inode_number}",
        f"File Type: {entry_type_label(record.entry_type)}",
        f"Permissions: {format_permissions(record.entry_type, record.permission_bits)}",
        f"Number of Hard Links: {record.link_count}",
        f"Owner UID: {record.owner_id}",
        f"Group GID: {record.group_id}",
        f"File Size: {format_size(record.size_bytes, human_readable)}",
        f"Last Access Time: {format_time(record.access_time, human_readable)}",
        f"Last Modification Time: {format_time(record.modification_time, human_readable)}",
        f"Last Status Change Time: {format_time(record.status_change_time, human_readable)}",
    ]
    return "\n".join(lines) + "\n"


def render_record(record: MetadataRecord, options: RenderOptions, stream: TextIO | None = None):
    """Write one record to ``stream`` (stdout by default) in the configured format."""
    if options.output_format is OutputFormat.JSON:
        output = generate_json(record, options.human_readable)
    else:
        output = generate_text(record, options.human_readable)
    (stream or sys.stdout).write(output)


def inspect_file(file_path: str, options: RenderOptions) -> MetadataRecord:
    """Render metadata for a single path.

    Exits with status 1 if the path cannot be stat'ed; nothing is written
    to stdout in that case.
    """
    try:
        record = read_metadata(file_path)
    except NotAccessibleError as e:
        report_unreadable(e.path, e.reason)
        sys.exit(1)

    render_record(record, options)
    return record


def inspect_directory(directory_path: str, options: RenderOptions) -> WalkStats:
    """Render metadata for every entry of a directory.

    Unreadable entries are skipped. Exits with status 1 only if the
    directory itself cannot be opened.
    """
    try:
        return walk_directory(
            directory_path, options, lambda record: render_record(record, options)
        )
    except DirectoryOpenFailedError as e:
        report_unopenable(e.path, e.reason)
        sys.exit(1)
