from __future__ import annotations

import os

from ext_renamer.domain.models import DirectoryEntry
from ext_renamer.ports.filesystem_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    def list_entries(self, folder_path: str) -> list[DirectoryEntry]:
        entries: list[DirectoryEntry] = []
        with os.scandir(folder_path) as it:
            for item in it:
                entries.append(DirectoryEntry(name=item.name, is_dir=self._is_dir(item)))
        return entries

    def rename(self, old_path: str, new_path: str) -> None:
        os.rename(old_path, new_path)

    @staticmethod
    def _is_dir(item: os.DirEntry) -> bool:
        try:
            return item.is_dir()
        except OSError:
            return False
