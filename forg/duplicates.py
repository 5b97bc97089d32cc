"""Detection, removal and relocation of files with identical contents."""

from __future__ import annotations

import os
from dataclasses import dataclass

from forg.checksum import _walk_files, calculate_checksum


@dataclass(frozen=True)
class DuplicateFile:
    """A file whose contents match an earlier file found in the walk."""

    original: str
    duplicate: str


def detect_duplicates(directory: str) -> list[DuplicateFile]:
    """Walk ``directory`` and pair each repeated file with the first copy."""
    seen: dict[str, str] = {}
    duplicates: list[DuplicateFile] = []
    for path, _info in _walk_files(directory):
        checksum = calculate_checksum(path)
        original = seen.get(checksum)
        if original is None:
            seen[checksum] = path
        else:
            duplicates.append(DuplicateFile(original=original, duplicate=path))
    return duplicates


def remove_duplicates(duplicates: list[DuplicateFile]) -> None:
    """Delete every duplicate file, stopping at the first failure."""
    for entry in duplicates:
        os.remove(entry.duplicate)
        print(f"Removed duplicate file: {entry.duplicate}")


def relocate_duplicates(duplicates: list[DuplicateFile], target_dir: str) -> None:
    """Move every duplicate file into ``target_dir``, creating it if needed."""
    for entry in duplicates:
        new_path = os.path.join(target_dir, os.path.basename(entry.duplicate))
        os.makedirs(target_dir, exist_ok=True)
        os.replace(entry.duplicate, new_path)
        print(f"Moved duplicate file: {entry.duplicate} to {new_path}")