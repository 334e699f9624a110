from .rename_service import RenameService, change_file_extensions

__all__ = ["RenameService", "change_file_extensions"]
