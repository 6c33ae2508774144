"""File access and path splitting helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_WINDOWS = os.name == "nt"
_SEPARATORS = ("/", "\\") if _WINDOWS else ("/",)


@dataclass(frozen=True)
class FilePath:
    """Directory, base name and extension of a file name."""

    dir_name: str
    base_name: str
    ext: str


def read_file(file_name: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of a file; raises OSError if it cannot be read."""
    return Path(file_name).read_bytes()


def file_exists(file_name: str | os.PathLike[str]) -> bool:
    """Return whether the file exists."""
    return os.access(os.fspath(file_name), os.F_OK)


def file_size(file_name: str | os.PathLike[str]) -> int:
    """Return the file size in bytes, or 0 if the file does not exist."""
    try:
        return os.stat(file_name).st_size
    except OSError:
        return 0


def full_path(file_name: str | os.PathLike[str]) -> str:
    """Return the canonical absolute path of an existing file; raises OSError otherwise."""
    return os.path.realpath(file_name, strict=True)


def is_path_sep(c: str) -> bool:
    """Return whether `c` is a path separator on this platform."""
    return c in _SEPARATORS


def split_path(file_name: str) -> FilePath:
    """Split a file name into directory, base name and extension.

    The extension starts at the first dot of the last path component.
    """
    dir_end = max(file_name.rfind(sep) for sep in _SEPARATORS)
    dir_name = file_name[:dir_end] if dir_end >= 0 else ""
    last = file_name[dir_end + 1:]
    dot = last.find(".")
    if dot < 0:
        return FilePath(dir_name, last, "")
    return FilePath(dir_name, last[:dot], last[dot:])


def is_path_separator(c: str) -> bool:
    """Return whether `c` is '/' or '\\', on any platform."""
    return c in ("/", "\\")


def skip_dir(path: str) -> str:
    """Return the path without its directory part."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[cut + 1:]


def trim_ext(path: str) -> str:
    """Return the path without everything from its last dot onwards."""
    dot = path.rfind(".")
    return path if dot < 0 else path[:dot]