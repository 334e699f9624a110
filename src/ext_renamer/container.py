from __future__ import annotations

from typing import Any

from ext_renamer.adapters.local_filesystem_adapter import LocalFileSystemAdapter
from ext_renamer.services.rename_service import RenameService


def build_services() -> dict[str, Any]:
    return {
        "rename_service": RenameService(LocalFileSystemAdapter()),
    }
