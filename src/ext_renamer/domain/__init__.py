from .errors import ExtensionRenameError, ListingError, RenameError
from .models import DirectoryEntry, RenameOp, RenameResult
from .rename_logic import (
    build_extension_plan,
    has_extension,
    normalize_extension,
    replace_extension,
)

__all__ = [
    "DirectoryEntry",
    "ExtensionRenameError",
    "ListingError",
    "RenameError",
    "RenameOp",
    "RenameResult",
    "build_extension_plan",
    "has_extension",
    "normalize_extension",
    "replace_extension",
]
