from .domain.errors import ExtensionRenameError, ListingError, RenameError
from .domain.models import DirectoryEntry, RenameOp, RenameResult
from .services.rename_service import RenameService, change_file_extensions

__all__ = [
    "DirectoryEntry",
    "ExtensionRenameError",
    "ListingError",
    "RenameError",
    "RenameOp",
    "RenameResult",
    "RenameService",
    "change_file_extensions",
]
