from __future__ import annotations

from typing import Protocol, runtime_checkable

from ext_renamer.domain.models import DirectoryEntry


@runtime_checkable
class FileSystemPort(Protocol):
    def list_entries(self, folder_path: str) -> list[DirectoryEntry]:
        """Return the immediate children of a folder. Raise OSError if it cannot be read."""

    def rename(self, old_path: str, new_path: str) -> None:
        """Move old_path to new_path in one step. Raise OSError on failure."""
