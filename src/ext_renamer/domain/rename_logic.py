from __future__ import annotations

import os
from typing import Iterable

from .models import DirectoryEntry, RenameOp

EXTENSION_SEPARATOR = "."


def normalize_extension(ext: str) -> str:
    """
    Return the extension with exactly one leading separator.

    Examples:
        >>> normalize_extension("txt")
        '.txt'
        >>> normalize_extension(".txt")
        '.txt'
        >>> normalize_extension("tar.gz")
        '.tar.gz'
    """
    stripped = ext.strip().lstrip(EXTENSION_SEPARATOR)
    if stripped == "":
        raise ValueError(f"Extension must not be empty: {ext!r}")
    if any(sep and sep in stripped for sep in (os.sep, os.altsep, "/")):
        raise ValueError(f"Extension must not contain a path separator: {ext!r}")
    return f"{EXTENSION_SEPARATOR}{stripped}"


def has_extension(name: str, ext: str) -> bool:
    """
    Case-sensitive trailing suffix test. The extension must already be normalized.

    Examples:
        >>> has_extension("notes.txt", ".txt")
        True
        >>> has_extension("notes.txt.bak", ".txt")
        False
        >>> has_extension("NOTES.TXT", ".txt")
        False
    """
    return name.endswith(ext)


def replace_extension(path: str, old_ext: str, new_ext: str) -> str:
    """
    Swap the trailing ``old_ext`` of ``path`` for ``new_ext``.

    Example:
        >>> replace_extension("/data/report.txt", ".txt", ".log")
        '/data/report.log'
    """
    if not path.endswith(old_ext):
        raise ValueError(f"{path!r} does not end with {old_ext!r}")
    return path[: len(path) - len(old_ext)] + new_ext


def build_extension_plan(
    folder_path: str,
    entries: Iterable[DirectoryEntry],
    old_ext: str,
    new_ext: str,
) -> list[RenameOp]:
    """
    Create rename operations for the files in ``entries`` ending with ``old_ext``.

    Directories are skipped whatever their name. Listing order is preserved.

    Example:
        entries = [DirectoryEntry("a.txt"), DirectoryEntry("d.txt", is_dir=True)]
        build_extension_plan("/tmp/x", entries, ".txt", ".log")
        # [RenameOp(old_path='/tmp/x/a.txt', new_path='/tmp/x/a.log')]
    """
    ops: list[RenameOp] = []
    for entry in entries:
        if entry.is_dir or not has_extension(entry.name, old_ext):
            continue
        old_path = os.path.join(folder_path, entry.name)
        ops.append(
            RenameOp(old_path=old_path, new_path=replace_extension(old_path, old_ext, new_ext))
        )
    return ops
