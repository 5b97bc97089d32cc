"""Sequential bulk renaming of files."""

from __future__ import annotations

import os

from forg.checksum import _extension, _walk_files


def bulk_rename(
    directory: str, prefix: str, suffix: str, start_number: int
) -> list[str]:
    """Rename every file to ``prefix + stem + number + suffix + extension``.

    Files are numbered in walk order starting at ``start_number``. Entries
    that cannot be read are skipped; a failed rename raises ``OSError``.
    Returns the new paths in order.
    """
    count = start_number
    renamed: list[str] = []
    for path, _info in _walk_files(directory, strict=False):
        name = os.path.basename(path)
        ext = _extension(name)
        stem = name[: len(name) - len(ext)]
        new_path = os.path.join(
            os.path.dirname(path), f"{prefix}{stem}{count}{suffix}{ext}"
        )
        os.replace(path, new_path)
        print(f"Renamed {path} to {new_path}")
        renamed.append(new_path)
        count += 1
    return renamed