from pathlib import Path
from typing import Iterator


def _slashes(path: Path | str) -> str:
    return str(path).replace("\\", "/")


def normalize(path: Path | str, prefix: Path | str) -> str:
    """Returns 'path' with forward slashes, relative to 'prefix' if it lies under it."""
    p = _slashes(path)
    root = _slashes(prefix).rstrip("/")
    if p.rstrip("/") == root:
        return "."
    if p.startswith(root + "/"):
        return p[len(root) + 1 :]
    return p


def walk(directory: Path) -> Iterator[Path]:
    """Yields every entry below 'directory', depth first and sorted by name.

    A directory that can not be read contributes nothing. Symlinked
    directories are yielded but not followed.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError:
        return

    for entry in entries:
        yield entry
        if entry.is_dir() and not entry.is_symlink():
            yield from walk(entry)
