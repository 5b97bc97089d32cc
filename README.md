# forg

A command-line tool for tidying up directories. It can:

- move files into category folders by extension (Images, Documents, Videos,
  Music, or your own categories from a YAML file)
- move files into `YEAR/MM` folders by modification date
- rename files in bulk with a prefix, a running number and a suffix
- find files with identical content (SHA-256) and remove them or move them
  elsewhere
- search directory trees by name, extension, size and modification date

## Installation

```
pip install .
```

This installs the `forg` command.

## Organizing

All organizing is done with `forg organize --dir DIR`. Without `--dir` the
command only prints a reminder to give one.

Sort files by type, using the built-in categories:

```
forg organize --dir ~/Downloads
```

| Category  | Extensions                         |
|-----------|------------------------------------|
| Images    | `.jpg` `.jpeg` `.png` `.gif`       |
| Documents | `.pdf` `.doc` `.docx` `.txt`       |
| Videos    | `.mp4` `.avi` `.mkv`               |
| Music     | `.mp3` `.wav` `.aac`               |

Extensions are matched exactly, including case. Files with other extensions
stay where they are. Each move is printed and also appended to
`file-organizer.log` in the current working directory.

Use your own categories from a YAML file with `-c`/`--config`:

```
forg organize --dir ~/Downloads --config categories.yaml
```

```yaml
categories:
  Images: [".jpg", ".png"]
  Archives: [".zip", ".tar", ".gz"]
```

Sort by modification date instead, into `YEAR/MM` folders under the directory
(local time):

```
forg organize --dir ~/Downloads --date
```

Sorting by type or by date always runs first. After that, if any of
`-p`/`--prefix`, `-s`/`--suffix` or `-n`/`--start-number` is given, every file
is renamed in walk order to `prefix + name + number + suffix + extension`, the
number starting at `--start-number` (default 0). So `notes.txt` becomes
`old-notes1-draft.txt` with:

```
forg organize --dir ~/Downloads -p old- -s -draft -n 1
```

Finally, files whose content duplicates an earlier file in the walk can be
deleted, or moved into another directory (created if needed). If both options
are given, `--remove` wins:

```
forg organize --dir ~/Downloads --remove
forg organize --dir ~/Downloads --relocate ~/duplicates
```

Errors in a step are printed and the command carries on with the next step;
the exit status stays 0. Only a malformed command line gives exit status 1.

## Searching

```
forg search ~/projects --name report --extension .pdf
forg search ~/projects --min-size 50kb --max-size 100mb
forg search ~/projects --after 2024-01-01 --before 2024-06-30
```

The paths of matching regular files are printed, one per line, depth first in
name order. Directories that cannot be read are reported as
`Skipping PATH: permission denied` and passed over.

- `-n`/`--name` keeps files whose name contains the text.
- `-e`/`--extension` keeps files whose extension (from the last dot) equals
  the text, such as `.pdf`.
- `--min-size`/`--max-size` take a whole number followed by `b`, `kb`, `mb` or
  `gb` (powers of 1024). The upper bound is applied only when a lower bound is
  given as well.
- `--before`/`--after` take a `YYYY-MM-DD` date, meaning midnight UTC of that
  day.

A malformed size or date is reported as an error and nothing is searched.

## Library use

The same operations are available from Python:

```python
from forg.bytype import categorize_by_type
from forg.duplicates import detect_duplicates, remove_duplicates
from forg.search import find_files

categorize_by_type("downloads", "")
remove_duplicates(detect_duplicates("downloads"))
for path in find_files(["downloads"], extension=".pdf"):
    print(path)
```

- `forg.bytype`: `categorize_by_type(directory, config_path)`,
  `load_config(config_path)` returning a `CategoryConfig`, and
  `DEFAULT_CATEGORIES`.
- `forg.bydate`: `organize_by_date(directory)`.
- `forg.renaming`: `bulk_rename(directory, prefix, suffix, start_number)`.
- `forg.duplicates`: `detect_duplicates(directory)` returning a list of
  `DuplicateFile(original, duplicate)`, `remove_duplicates(duplicates)` and
  `relocate_duplicates(duplicates, target_dir)`.
- `forg.checksum`: `calculate_checksum(path)`, the hex SHA-256 of a file.
- `forg.search`: `parse_size(size_str)`, `find_files(...)` yielding matching
  paths, and `search_files(...)`, which also prints them.
- `forg.oplog`: `log_operation(operation)` and `get_logger()` for the
  `file-organizer.log` operation log.

The organizing functions return the new paths in the order the files were
moved and raise `OSError` on file system errors; malformed configuration,
sizes or dates raise `ValueError`.

## Limitations

There is no undo: moves, renames and deletions are not reversible from the
tool, and the log records only moves made while sorting by type. Files with the
same name moved into the same folder replace one another.