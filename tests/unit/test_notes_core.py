from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from til.core import notes_impl
from til.core.errors import (
    CannotOpenOrCreatePath,
    CannotParseMetaData,
    CannotReadFile,
    CannotWriteToFile,
)
from til.core.result import Err, Ok

HEADER_AB = '---\ntitle: "default"\ntags: [a, b]\n---\n\n'


@pytest.fixture
def note_path(tmp_path: Path) -> Path:
    day_dir = tmp_path / "01-02-2025"
    day_dir.mkdir()
    return day_dir / "default.md"


def test_first_write_creates_header_and_entry(note_path: Path) -> None:
    result = notes_impl.append_entry(note_path, "first entry", ["python", "git"])

    assert result == Ok(None)
    assert note_path.read_text(encoding="utf-8") == (
        '---\ntitle: "default"\ntags: [python, git]\n---\n\n- first entry\n'
    )


def test_first_write_without_tags(note_path: Path) -> None:
    notes_impl.append_entry(note_path, "untagged")

    assert note_path.read_text(encoding="utf-8") == (
        '---\ntitle: "default"\ntags: []\n---\n\n- untagged\n'
    )


def test_first_write_drops_repeated_tags(note_path: Path) -> None:
    notes_impl.append_entry(note_path, "x", ["a", "b", "a"])

    assert "tags: [a, b]\n" in note_path.read_text(encoding="utf-8")


def test_zero_length_file_gets_header(note_path: Path) -> None:
    note_path.touch()

    notes_impl.append_entry(note_path, "hello", ["t"])

    content = note_path.read_text(encoding="utf-8")
    assert content.startswith("---\n")
    assert content.count("---\n") == 2


def test_entries_are_append_only(note_path: Path) -> None:
    """Every write adds one entry line in call order; earlier lines stay put."""
    for i in range(1, 6):
        assert notes_impl.append_entry(note_path, f"c{i}").is_ok()

    content = note_path.read_text(encoding="utf-8")
    entries = [line for line in content.splitlines() if line.startswith("- ")]
    assert entries == ["- c1", "- c2", "- c3", "- c4", "- c5"]
    assert content.count("title:") == 1


def test_merge_adds_only_new_tags(note_path: Path) -> None:
    note_path.write_text(HEADER_AB + "- one\n", encoding="utf-8")

    result = notes_impl.append_entry(note_path, "two", ["b", "c"])

    assert result.is_ok()
    assert note_path.read_text(encoding="utf-8") == (
        '---\ntitle: "default"\ntags: [a, b, c]\n---\n\n- one\n- two\n'
    )


def test_merge_with_present_tag_is_noop(note_path: Path) -> None:
    before = HEADER_AB + "- one\n"
    note_path.write_text(before, encoding="utf-8")

    with patch("til.core.notes_impl._replace_contents") as mock_replace:
        result = notes_impl.append_entry(note_path, "two", ["a"])

    assert result.is_ok()
    mock_replace.assert_not_called()
    assert note_path.read_text(encoding="utf-8") == before + "- two\n"


def test_empty_tags_skip_header(note_path: Path) -> None:
    """With no tags the existing file is never read or rewritten."""
    note_path.write_text("---\nbroken header\n", encoding="utf-8")

    with patch("til.core.notes_impl._merge_header") as mock_merge:
        result = notes_impl.append_entry(note_path, "still appended", [])

    assert result.is_ok()
    mock_merge.assert_not_called()
    assert note_path.read_text(encoding="utf-8") == "---\nbroken header\n- still appended\n"


def test_header_without_tags_line_is_rejected(note_path: Path) -> None:
    before = '---\ntitle: "default"\n---\n\n- one\n'
    note_path.write_text(before, encoding="utf-8")

    result = notes_impl.append_entry(note_path, "two", ["a"])

    assert isinstance(result, Err)
    assert isinstance(result.error, CannotParseMetaData)
    assert note_path.read_text(encoding="utf-8") == before


def test_entry_matching_tags_line_is_preserved(note_path: Path) -> None:
    note_path.write_text(HEADER_AB + "- one\ntags: [a, b]\n", encoding="utf-8")

    notes_impl.append_entry(note_path, "two", ["c"])

    assert note_path.read_text(encoding="utf-8") == (
        '---\ntitle: "default"\ntags: [a, b, c]\n---\n\n- one\ntags: [a, b]\n- two\n'
    )


def test_crlf_file_keeps_line_endings(note_path: Path) -> None:
    note_path.write_bytes(b'---\r\ntitle: "default"\r\ntags: [a]\r\n---\r\n\r\n- one\r\n')

    notes_impl.append_entry(note_path, "two", ["b"])

    assert note_path.read_bytes() == (
        b'---\r\ntitle: "default"\r\ntags: [a, b]\r\n---\r\n\r\n- one\r\n- two\n'
    )


def test_merge_write_failure_leaves_file_intact(note_path: Path) -> None:
    before = HEADER_AB + "- one\n"
    note_path.write_text(before, encoding="utf-8")

    with patch("til.core.notes_impl.os.replace", side_effect=OSError("disk full")):
        result = notes_impl.append_entry(note_path, "two", ["c"])

    assert isinstance(result, Err)
    assert isinstance(result.error, CannotWriteToFile)
    assert note_path.read_text(encoding="utf-8") == before
    assert list(note_path.parent.iterdir()) == [note_path]


def test_unreadable_file_on_merge(note_path: Path) -> None:
    note_path.write_bytes(b"\xff\xfe not utf-8")

    result = notes_impl.append_entry(note_path, "two", ["c"])

    assert isinstance(result, Err)
    assert isinstance(result.error, CannotReadFile)


def test_missing_directory_cannot_open(tmp_path: Path) -> None:
    path = tmp_path / "missing" / "default.md"

    result = notes_impl.append_entry(path, "entry")

    assert isinstance(result, Err)
    assert isinstance(result.error, CannotOpenOrCreatePath)
    assert result.error.path == path


def test_format_entry() -> None:
    assert notes_impl.format_entry("learned a thing") == "- learned a thing\n"


def test_merge_keeps_file_mode(note_path: Path) -> None:
    note_path.write_text(HEADER_AB + "- one\n", encoding="utf-8")
    note_path.chmod(0o600)

    assert notes_impl.append_entry(note_path, "two", ["c"]).is_ok()

    assert "tags: [a, b, c]\n" in note_path.read_text(encoding="utf-8")
    assert note_path.stat().st_mode & 0o777 == 0o600


def test_padded_tag_is_distinct_from_stored_tag(note_path: Path) -> None:
    """Tags match exactly; callers pass trimmed tags to keep merges idempotent."""
    note_path.write_text('---\ntitle: "default"\ntags: [a]\n---\n\n', encoding="utf-8")

    notes_impl.append_entry(note_path, "one", [" a"])
    notes_impl.append_entry(note_path, "two", ["a"])

    content = note_path.read_text(encoding="utf-8")
    assert "tags: [a,  a]\n" in content
    assert content.endswith("- one\n- two\n")
