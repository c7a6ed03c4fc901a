"""Tests for text/JSON rendering and the top-level inspect operations."""

import dataclasses
import json

import pytest

from inodeinspect import file_operations
from inodeinspect.models import (
    EntryType,
    MetadataRecord,
    OutputFormat,
    RenderOptions,
)
from inodeinspect.output_generators import (
    generate_json,
    generate_text,
    inspect_directory,
    inspect_file,
    render_record,
)

RECORD = MetadataRecord(
    path="dir/report.pdf",
    inode_number=131074,
    entry_type=EntryType.REGULAR_FILE,
    permission_bits=0o644,
    link_count=1,
    owner_id=1000,
    group_id=100,
    size_bytes=2048,
    access_time=1700000000,
    modification_time=1700000100,
    status_change_time=1700000200,
)


def parse_units(output):
    """Split concatenated top-level JSON documents."""
    decoder = json.JSONDecoder()
    units = []
    index = 0
    while index < len(output):
        if output[index].isspace():
            index += 1
            continue
        obj, index = decoder.raw_decode(output, index)
        units.append(obj)
    return units


def test_json_key_order_and_value_types():
    data = json.loads(generate_json(RECORD, human_readable=False))

    assert list(data) == ["filePath", "inode"]
    assert list(data["inode"]) == [
        "number",
        "type",
        "permissions",
        "linkCount",
        "uid",
        "gid",
        "size",
        "accessTime",
        "modificationTime",
        "statusChangeTime",
    ]
    assert data["filePath"] == "dir/report.pdf"
    inode = data["inode"]
    assert inode["number"] == 131074
    assert inode["linkCount"] == 1
    assert inode["uid"] == 1000
    assert inode["gid"] == 100
    assert inode["type"] == "regular file"
    assert inode["permissions"] == "-rw-r--r--"
    assert inode["size"] == "2048"
    assert inode["accessTime"] == "1700000000"
    assert inode["modificationTime"] == "1700000100"
    assert inode["statusChangeTime"] == "1700000200"


def test_json_human_readable_size():
    data = json.loads(generate_json(RECORD, human_readable=True))
    assert data["inode"]["size"] == "2.00 KB"
    assert len(data["inode"]["accessTime"]) == len("YYYY-MM-DD HH:MM:SS")


def test_json_escapes_awkward_paths():
    record = dataclasses.replace(RECORD, path='odd "name"\\x')
    assert json.loads(generate_json(record, False))["filePath"] == 'odd "name"\\x'


def test_text_lines_in_fixed_order():
    lines = generate_text(RECORD, human_readable=False).splitlines()
    assert lines == [
        "Information for dir/report.pdf:",
        "File Inode: 131074",
        "File Type: regular file",
        "Permissions: -rw-r--r--",
        "Number of Hard Links: 1",
        "Owner UID: 1000",
        "Group GID: 100",
        "File Size: 2048",
        "Last Access Time: 1700000000",
        "Last Modification Time: 1700000100",
        "Last Status Change Time: 1700000200",
    ]


def test_render_record_writes_selected_format(capsys):
    render_record(RECORD, RenderOptions(output_format=OutputFormat.JSON))
    assert json.loads(capsys.readouterr().out)["inode"]["number"] == 131074

    render_record(RECORD, RenderOptions(output_format=OutputFormat.TEXT, human_readable=True))
    assert "File Size: 2.00 KB" in capsys.readouterr().out


def test_inspect_directory_json_scenario(tmp_path, capsys):
    (tmp_path / "file.bin").write_bytes(b"\0" * 2048)
    (tmp_path / "child").mkdir()

    stats = inspect_directory(
        str(tmp_path), RenderOptions(output_format=OutputFormat.JSON, human_readable=True)
    )
    units = parse_units(capsys.readouterr().out)

    assert stats.rendered == 2
    assert len(units) == 2
    sizes = {u["filePath"]: u["inode"]["size"] for u in units}
    assert sizes[str(tmp_path / "file.bin")] == "2.00 KB"

    inspect_directory(str(tmp_path), RenderOptions(output_format=OutputFormat.JSON))
    units = parse_units(capsys.readouterr().out)
    sizes = {u["filePath"]: u["inode"]["size"] for u in units}
    assert sizes[str(tmp_path / "file.bin")] == "2048"


def test_inspect_file_missing_exits_without_output(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        inspect_file(str(tmp_path / "ghost"), RenderOptions())
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error getting file info for" in captured.err


def test_inspect_directory_missing_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        inspect_directory(str(tmp_path / "ghost"), RenderOptions())
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: Unable to open directory" in captured.err


def test_far_future_timestamp_does_not_stop_the_walk(tmp_path, monkeypatch, capsys):
    (tmp_path / "future").write_text("f", encoding="utf-8")
    (tmp_path / "other").write_text("o", encoding="utf-8")
    future = str(tmp_path / "future")
    real_read = file_operations.read_metadata

    def far_future_read(path):
        record = real_read(path)
        if path == future:
            record = dataclasses.replace(
                record,
                access_time=300000000000,
                modification_time=300000000000,
            )
        return record

    monkeypatch.setattr(file_operations, "read_metadata", far_future_read)

    stats = inspect_directory(
        str(tmp_path), RenderOptions(output_format=OutputFormat.JSON, human_readable=True)
    )
    units = {u["filePath"]: u for u in parse_units(capsys.readouterr().out)}

    assert stats.rendered == 2
    assert set(units) == {future, str(tmp_path / "other")}
    assert units[future]["inode"]["modificationTime"].startswith("11476-")
