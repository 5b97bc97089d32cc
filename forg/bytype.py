"""Sorting files into category folders by extension."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import yaml

from forg.checksum import _extension, _walk_files
from forg.oplog import log_operation

DEFAULT_CATEGORIES: dict[str, list[str]] = {
    "Images": [".jpg", ".jpeg", ".png", ".gif"],
    "Documents": [".pdf", ".doc", ".docx", ".txt"],
    "Videos": [".mp4", ".avi", ".mkv"],
    "Music": [".mp3", ".wav", ".aac"],
}


@dataclass
class CategoryConfig:
    """Mapping of category folder names to the extensions they collect."""

    categories: dict[str, list[str]] = field(default_factory=dict)


def load_config(config_path: str) -> CategoryConfig:
    """Read a YAML file with a top-level ``categories`` mapping."""
    with open(config_path, encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is None:
        return CategoryConfig()
    if not isinstance(data, dict):
        raise ValueError("configuration must be a mapping")
    raw = data.get("categories")
    if raw is None:
        return CategoryConfig()
    if not isinstance(raw, dict):
        raise ValueError("'categories' must be a mapping")
    categories: dict[str, list[str]] = {}
    for name, extensions in raw.items():
        if extensions is None:
            extensions = []
        if not isinstance(extensions, list):
            raise ValueError(f"extensions of category {name!r} must be a list")
        categories[str(name)] = [str(ext) for ext in extensions]
    return CategoryConfig(categories)


def categorize_by_type(directory: str, config_path: str | None) -> list[str]:
    """Move each file whose extension is listed into ``directory/<category>``.

    Uses the categories from ``config_path`` when given, the defaults
    otherwise. Returns the new paths in the order the files were moved.
    """
    if config_path:
        categories = load_config(config_path).categories
    else:
        categories = DEFAULT_CATEGORIES

    moved: list[str] = []
    for path, _info in _walk_files(directory):
        name = os.path.basename(path)
        ext = _extension(name)
        category = next(
            (cat for cat, extensions in categories.items() if ext in extensions),
            None,
        )
        if category is None:
            continue
        destination = os.path.join(directory, category)
        os.makedirs(destination, exist_ok=True)
        new_path = os.path.join(destination, name)
        os.replace(path, new_path)
        message = f"Moved {path} to {new_path}"
        print(message)
        log_operation(message)
        moved.append(new_path)
    return moved