"""File checksums and the directory walk shared by the organizers."""

from __future__ import annotations

import hashlib
import os
import stat
from collections.abc import Iterator


def calculate_checksum(path: str | os.PathLike[str]) -> str:
    """Return the lowercase hex SHA-256 digest of the file's contents."""
    with open(path, "rb") as handle:
        return hashlib.file_digest(handle, "sha256").hexdigest() if hasattr(
            hashlib, "file_digest"
        ) else _digest(handle)


def _digest(handle) -> str:
    hasher = hashlib.sha256()
    for chunk in iter(lambda: handle.read(65536), b""):
        hasher.update(chunk)
    return hasher.hexdigest()


def _extension(name: str) -> str:
    """Return the suffix from the last dot of ``name``, or '' if none."""
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def _walk_files(root: str, *, strict: bool = True) -> Iterator[tuple[str, os.stat_result]]:
    """Yield ``(path, lstat)`` for every non-directory under ``root``, depth first in lexical order.

    Directories are listed only when reached. With ``strict`` an ``OSError``
    stops the walk; otherwise the failing entry is skipped.
    """
    try:
        info = os.lstat(root)
        if not stat.S_ISDIR(info.st_mode):
            yield root, info
            return
        names = sorted(os.listdir(root))
    except OSError:
        if strict:
            raise
        return
    for name in names:
        yield from _walk_files(os.path.join(root, name), strict=strict)