"""globfs: In-memory directory views for glob matching."""

from .base import DirectoryEntry, FileEntry, FileSystemEntry
from .config import VirtualTreeConfig, connect_tree
from .context import current_root, working_directory
from .paths import InvalidPathError, normalize_path
from .virtual import VirtualDirectory, VirtualFile

__all__ = [
    "connect_tree",
    "current_root",
    "DirectoryEntry",
    "FileEntry",
    "FileSystemEntry",
    "InvalidPathError",
    "normalize_path",
    "VirtualDirectory",
    "VirtualFile",
    "VirtualTreeConfig",
    "working_directory",
]
