import os
from pathlib import Path

import pytest

from overture.files import (
    FilePath,
    file_exists,
    file_size,
    full_path,
    is_path_sep,
    is_path_separator,
    read_file,
    skip_dir,
    split_path,
    trim_ext,
)


def test_file(tmp_path):
    file_name = tmp_path / "the_file.txt"
    contents = b"Hello world!"
    file_name.write_bytes(contents)

    assert file_exists(file_name)
    buf = read_file(file_name)
    assert len(buf) == len(contents)
    assert buf == contents


def test_file_size_of_existing_file(tmp_path):
    file_name = tmp_path / "the_file.txt"
    file_name.write_bytes(b"Hello world!")
    assert file_size(file_name) == 12


def test_missing_file(tmp_path):
    missing = tmp_path / "missing.txt"
    assert not file_exists(missing)
    assert file_size(missing) == 0
    with pytest.raises(FileNotFoundError):
        read_file(missing)
    with pytest.raises(OSError):
        full_path(missing)


def test_read_empty_file(tmp_path):
    file_name = tmp_path / "empty"
    file_name.write_bytes(b"")
    assert read_file(file_name) == b""


def test_full_path_is_absolute_and_same_file(tmp_path):
    file_name = tmp_path / "the_file.txt"
    file_name.write_bytes(b"x")
    resolved = full_path(os.path.relpath(file_name))
    assert Path(resolved).is_absolute()
    assert os.path.samefile(resolved, file_name)


def test_is_path_sep():
    assert is_path_sep("/")
    assert not is_path_sep("a")


def test_split_path_with_directory():
    assert split_path("dir/sub/file.tar.gz") == FilePath("dir/sub", "file", ".tar.gz")


def test_split_path_without_directory():
    assert split_path("file.txt") == FilePath("", "file", ".txt")


def test_split_path_without_extension():
    assert split_path("dir/file") == FilePath("dir", "file", "")


def test_split_path_dot_in_directory_is_not_extension():
    assert split_path("a.b/c") == FilePath("a.b", "c", "")


def test_is_path_separator_accepts_both_slashes():
    assert is_path_separator("/")
    assert is_path_separator("\\")
    assert not is_path_separator(".")


def test_skip_dir():
    assert skip_dir("a/b\\c.txt") == "c.txt"
    assert skip_dir("c.txt") == "c.txt"


def test_trim_ext():
    assert trim_ext("dir/file.tar.gz") == "dir/file.tar"
    assert trim_ext("file") == "file"