from __future__ import annotations

import os
from pathlib import Path

import pytest

from textstore.buffer import BufferIOError, FileNotSetError, Point, TextStore


def write_file(path: Path, lines: list[str]) -> None:
    path.write_bytes("".join(line + os.linesep for line in lines).encode("utf-8"))


def test_load_reads_lines_and_remembers_path(tmp_path: Path) -> None:
    source = tmp_path / "notes.txt"
    write_file(source, ["alpha", "", "gamma"])

    store = TextStore.load(source)

    assert store.path == source
    assert store.content == "alphagamma"
    assert store.line_lengths == (5, 0, 5)
    assert store.name == "notes.txt"


def test_save_after_load_reproduces_file(tmp_path: Path) -> None:
    source = tmp_path / "round.txt"
    write_file(source, ["first", "", "  indented", "last"])
    original = source.read_bytes()

    TextStore.load(source).save()

    assert source.read_bytes() == original


def test_save_writes_edits_with_trailing_newline(tmp_path: Path) -> None:
    source = tmp_path / "edit.txt"
    source.write_text("hello", encoding="utf-8")
    store = TextStore.load(source)

    store.insert_char(Point(5, 0), "!")
    store.insert_line(2, "tail")
    store.save()

    nl = os.linesep
    assert source.read_bytes() == f"hello!{nl}{nl}tail{nl}".encode("utf-8")


def test_save_without_path_fails() -> None:
    store = TextStore.from_text("scratch")

    with pytest.raises(FileNotSetError):
        store.save()


def test_load_missing_file_raises_io_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"

    with pytest.raises(BufferIOError) as excinfo:
        TextStore.load(missing)

    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.__cause__, OSError)


def test_load_invalid_utf8_raises_io_error(tmp_path: Path) -> None:
    source = tmp_path / "binary.txt"
    source.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(BufferIOError) as excinfo:
        TextStore.load(source)

    assert isinstance(excinfo.value.__cause__, UnicodeError)


def test_save_to_directory_raises_io_error(tmp_path: Path) -> None:
    store = TextStore.from_text("data")
    store.path = tmp_path

    with pytest.raises(BufferIOError):
        store.save()
