from __future__ import annotations


class ExtensionRenameError(Exception):
    """Base class for failures collected while changing extensions."""


class ListingError(ExtensionRenameError):
    """The folder could not be read; nothing was renamed."""

    def __init__(self, folder_path: str, cause: BaseException) -> None:
        super().__init__(f"Error reading directory {folder_path}: {cause}")
        self.folder_path = folder_path
        self.cause = cause
        self.__cause__ = cause


class RenameError(ExtensionRenameError):
    """A single file could not be renamed; the rest of the batch still ran."""

    def __init__(self, old_path: str, new_path: str, cause: BaseException) -> None:
        super().__init__(f"Failed to rename {old_path} to {new_path}: {cause}")
        self.old_path = old_path
        self.new_path = new_path
        self.cause = cause
        self.__cause__ = cause
