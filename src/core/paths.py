"""
Path utilities for repository-relative paths.

GitHub paths are POSIX-style and relative to the repository root; the
empty string denotes the root itself.
"""

from __future__ import annotations

from pathlib import PurePosixPath


def normalize_posix_relpath(p: str) -> str:
    """Normalize a user path to a clean POSIX relative path.

    Converts backslashes to '/', trims whitespace, removes leading '/'
    and repeated './' markers.
    """
    s = (p or "").strip()
    s = s.replace("\\", "/")
    s = s.lstrip("/")
    while s.startswith("./"):
        s = s[2:].lstrip("/")
    if s == ".":
        return ""
    return s


def file_extension(path: str, default: str = "txt") -> str:
    """Lower-cased extension of the last path component.

    A component without a dot (e.g. 'Makefile') or ending in a dot yields
    `default`.
    """
    name = PurePosixPath(normalize_posix_relpath(path)).name
    if "." not in name:
        return default
    ext = name.rsplit(".", 1)[-1]
    return ext.lower() if ext else default


def has_dot_segment(path: str) -> bool:
    """True when any '/'-separated segment of `path` is '.' or '..'."""
    return any(seg in (".", "..") for seg in (path or "").split("/"))
