"""Read, list, search and describe files, with ``~`` expanded from ``$HOME``."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from pathlib import Path


class FilesystemError(Exception):
    """Raised when a filesystem operation fails."""


def expand_path(path: str) -> Path:
    """Return ``path`` as a :class:`Path`, replacing a leading ``~`` with ``$HOME``."""
    if path == "~" or path.startswith("~/"):
        home = os.environ.get("HOME")
        if home is None:
            raise FilesystemError("Cannot determine home directory from $HOME")
        if path == "~":
            return Path(home)
        return Path(home) / path[2:]
    return Path(path)


def _entry_kind(entry: os.DirEntry) -> str:
    try:
        return "[DIR]" if entry.is_dir(follow_symlinks=False) else "[FILE]"
    except OSError:
        return "[UNKNOWN]"


def _describe_entries(entries: Iterator[os.DirEntry]) -> Iterator[str]:
    try:
        for entry in entries:
            yield f"{_entry_kind(entry)} {entry.name}\n"
    except OSError as exc:
        yield f"Error reading entry: {exc}\n"


def list_directory(path: str) -> list[str]:
    """Return one ``[DIR] name`` or ``[FILE] name`` line per entry of a directory."""
    target = expand_path(path)
    try:
        entries = os.scandir(target)
    except OSError as exc:
        raise FilesystemError(f"Failed to read directory: {exc}") from exc
    with entries:
        return list(_describe_entries(entries))


def read_file(path: str) -> str:
    """Return the contents of a UTF-8 text file, newlines untouched."""
    target = expand_path(path)
    try:
        with open(target, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FilesystemError(f"Failed to read file: {exc}") from exc


def _matching_paths(directory: str, needle: str) -> Iterator[str]:
    with os.scandir(directory) as entries:
        for entry in entries:
            if needle in entry.name.lower():
                yield entry.path
            if os.path.isdir(entry.path):
                yield from _matching_paths(entry.path, needle)


def search_file(path: str, pattern: str) -> str:
    """Recursively find entries whose name contains ``pattern``, ignoring case.

    Returns the matching paths joined by newlines.
    """
    target = expand_path(path)
    try:
        matches = list(_matching_paths(str(target), pattern.lower()))
    except OSError as exc:
        raise FilesystemError(f"Failed to search directory: {exc}") from exc
    return "\n".join(matches)


def _format_time(nanoseconds: int) -> str:
    seconds, nanos = divmod(nanoseconds, 1_000_000_000)
    return f"SystemTime {{ tv_sec: {seconds}, tv_nsec: {nanos} }}"


def _describe_stat(info: os.stat_result) -> str:
    mode = info.st_mode
    is_file = str(stat.S_ISREG(mode)).lower()
    is_dir = str(stat.S_ISDIR(mode)).lower()
    is_symlink = str(stat.S_ISLNK(mode)).lower()
    readonly = str(mode & 0o222 == 0).lower()
    fields = [
        "file_type: FileType { "
        f"is_file: {is_file}, "
        f"is_dir: {is_dir}, "
        f"is_symlink: {is_symlink} }}",
        f"permissions: Permissions {{ mode: {mode:#o} ({stat.filemode(mode)}), "
        f"readonly: {readonly} }}",
        f"len: {info.st_size}",
        f"modified: {_format_time(info.st_mtime_ns)}",
        f"accessed: {_format_time(info.st_atime_ns)}",
    ]
    birthtime = getattr(info, "st_birthtime", None)
    if birthtime is not None:
        fields.append(f"created: {_format_time(int(birthtime * 1_000_000_000))}")
    return "Metadata { " + ", ".join(fields) + " }"


def get_file_info(path: str) -> str:
    """Return a one-line description of the file's metadata, following symlinks."""
    target = expand_path(path)
    try:
        info = os.stat(target)
    except OSError as exc:
        raise FilesystemError(f"Failed to get metadata: {exc}") from exc
    return _describe_stat(info)