from __future__ import annotations

import logging

from ext_renamer.adapters.local_filesystem_adapter import LocalFileSystemAdapter
from ext_renamer.domain.errors import ListingError, RenameError
from ext_renamer.domain.models import RenameResult
from ext_renamer.domain.rename_logic import build_extension_plan, normalize_extension
from ext_renamer.ports.filesystem_port import FileSystemPort

logger = logging.getLogger(__name__)


class RenameService:
    def __init__(self, filesystem: FileSystemPort) -> None:
        self._filesystem = filesystem

    def change_extensions(self, old_ext: str, new_ext: str, folder_path: str) -> RenameResult:
        """
        Rename every file directly inside ``folder_path`` from ``old_ext`` to ``new_ext``.

        Failures come back in ``RenameResult.errors`` rather than being raised. A folder
        that cannot be listed yields a single ``ListingError`` and no renames; a file that
        cannot be renamed yields a ``RenameError`` and the batch carries on.
        """
        old_ext = normalize_extension(old_ext)
        new_ext = normalize_extension(new_ext)
        result = RenameResult()

        try:
            entries = self._filesystem.list_entries(folder_path)
        except OSError as exc:
            error = ListingError(folder_path, exc)
            logger.info("%s", error)
            result.errors.append(error)
            return result

        ops = build_extension_plan(folder_path, entries, old_ext, new_ext)
        logger.debug("Found %d file(s) ending with %s in %s", len(ops), old_ext, folder_path)

        for op in ops:
            try:
                self._filesystem.rename(op.old_path, op.new_path)
            except OSError as exc:
                error = RenameError(op.old_path, op.new_path, exc)
                logger.info("%s", error)
                result.errors.append(error)
                continue
            logger.debug("Renamed %s to %s", op.old_path, op.new_path)
            result.renamed.append(op.new_path)

        return result


def change_file_extensions(old_ext: str, new_ext: str, folder_path: str) -> RenameResult:
    """Run ``RenameService.change_extensions`` against the local filesystem."""
    return RenameService(LocalFileSystemAdapter()).change_extensions(old_ext, new_ext, folder_path)
