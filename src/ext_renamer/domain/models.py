from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .errors import ExtensionRenameError, ListingError


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    is_dir: bool = False


@dataclass(frozen=True)
class RenameOp:
    old_path: str
    new_path: str


@dataclass
class RenameResult:
    """
    Outcome of one extension change over a folder.

    Unpacks as ``(renamed, errors)``:

        >>> renamed, errors = RenameResult(renamed=["a.log"])
        >>> renamed, errors
        (['a.log'], [])
    """

    renamed: list[str] = field(default_factory=list)
    errors: list[ExtensionRenameError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def listing_failed(self) -> bool:
        return len(self.errors) == 1 and isinstance(self.errors[0], ListingError)

    def __iter__(self) -> Iterator[list]:
        yield self.renamed
        yield self.errors
