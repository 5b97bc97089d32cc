"""Searching directory trees for files matching name, type, size and date filters."""

from __future__ import annotations

import os
import re
import stat
from collections.abc import Iterable, Iterator
from datetime import datetime, timezone

from forg.checksum import _extension

SIZE_UNITS: dict[str, int] = {"b": 1, "kb": 1024, "mb": 1024**2, "gb": 1024**3}

_SIZE_PATTERN = re.compile(r"\s*([+-]?[0-9]+)\s*(\S+)")
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_size(size_str: str | None) -> int:
    """Convert a size such as ``3b``, ``50kb`` or ``100mb`` to bytes; empty gives 0.

    Raises ``ValueError`` for a malformed size or an unknown unit.
    """
    if not size_str:
        return 0
    match = _SIZE_PATTERN.match(size_str)
    if match is None:
        raise ValueError("invalid size format")
    number, unit = match.groups()
    if unit not in SIZE_UNITS:
        raise ValueError("invalid size unit")
    return int(number) * SIZE_UNITS[unit]


def _parse_date(text: str | None, which: str) -> int | None:
    """Return midnight UTC of a ``YYYY-MM-DD`` date in nanoseconds, or None."""
    if not text:
        return None
    try:
        if _DATE_PATTERN.fullmatch(text) is None:
            raise ValueError
        day = datetime.strptime(text, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    except ValueError:
        raise ValueError(f"invalid {which} date format") from None
    return int(day.timestamp()) * 1_000_000_000


def _walk_regular(path: str) -> Iterator[str]:
    """Yield regular files under ``path`` depth first in lexical order, skipping unreadable entries."""
    try:
        info = os.lstat(path)
        if stat.S_ISREG(info.st_mode):
            yield path
            return
        if not stat.S_ISDIR(info.st_mode):
            return
        names = sorted(os.listdir(path))
    except PermissionError:
        print(f"Skipping {path}: permission denied")
        return
    for name in names:
        yield from _walk_regular(os.path.join(path, name))


def find_files(
    paths: Iterable[str],
    name: str = "",
    extension: str = "",
    before_date: str = "",
    after_date: str = "",
    min_size: str = "",
    max_size: str = "",
) -> Iterator[str]:
    """Return an iterator over the files under ``paths`` that pass every filter.

    Malformed filters raise ``ValueError`` at once; walk errors are raised while iterating.
    """
    before_ns = _parse_date(before_date, "before")
    after_ns = _parse_date(after_date, "after")
    low, high = parse_size(min_size), parse_size(max_size)
    roots = [os.fspath(path) for path in paths]

    def accepts(path: str) -> bool:
        try:
            info = os.stat(path)
        except OSError:
            return False
        base = os.path.basename(path)
        return not (
            not stat.S_ISREG(info.st_mode)
            or (name and name not in base)
            or (extension and _extension(base) != extension)
            # The upper bound is only enforced together with a lower bound.
            or (low > 0 and not low <= info.st_size <= high)
            or (before_ns is not None and info.st_mtime_ns > before_ns)
            or (after_ns is not None and info.st_mtime_ns < after_ns)
        )

    return (path for root in roots for path in _walk_regular(root) if accepts(path))


def search_files(
    paths: Iterable[str],
    name: str = "",
    extension: str = "",
    before_date: str = "",
    after_date: str = "",
    min_size: str = "",
    max_size: str = "",
) -> list[str]:
    """Print every matching file, one per line, and return them in order."""
    found = list(
        find_files(paths, name, extension, before_date, after_date, min_size, max_size)
    )
    for path in found:
        print(path)
    return found