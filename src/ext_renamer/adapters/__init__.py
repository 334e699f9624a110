from .local_filesystem_adapter import LocalFileSystemAdapter

__all__ = ["LocalFileSystemAdapter"]
