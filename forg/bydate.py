"""Grouping files into year/month folders by modification time."""

from __future__ import annotations

import os
import time

from forg.checksum import _walk_files


def organize_by_date(directory: str) -> list[str]:
    """Move each file into ``directory/YYYY/MM`` by its local modification time.

    Returns the new paths in the order the files were moved.
    """
    moved: list[str] = []
    for path, info in _walk_files(directory):
        modified = time.localtime(info.st_mtime)
        target_dir = os.path.join(
            directory, str(modified.tm_year), f"{modified.tm_mon:02d}"
        )
        os.makedirs(target_dir, exist_ok=True)
        new_path = os.path.join(target_dir, os.path.basename(path))
        os.replace(path, new_path)
        print(f"Moved {path} to {new_path}")
        moved.append(new_path)
    return moved