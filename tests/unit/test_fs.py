"""Unit tests for util/fs.py"""

import pytest

from mdterm.util.fs import discover_files, read_sources


def test_discover_files_single(tmp_path):
    f = tmp_path / "doc.md"
    f.write_text("# Hello")
    assert discover_files(f) == [f]


def test_discover_files_dir_sorted_and_filtered(tmp_path):
    (tmp_path / "b.md").write_text("b")
    (tmp_path / "notes.txt").write_text("text")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "a.mdx").write_text("a")
    assert discover_files(tmp_path) == [tmp_path / "b.md", sub / "a.mdx"]


def test_read_sources_file(tmp_path):
    f = tmp_path / "doc.md"
    f.write_text("text", encoding="utf-8")
    assert read_sources(str(f)) == [(str(f), "text")]


def test_read_sources_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_sources(str(tmp_path / "nope.md"))


def test_read_sources_bad_encoding(tmp_path):
    f = tmp_path / "bin.md"
    f.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(ValueError, match="not valid UTF-8"):
        read_sources(str(f))
