"""Entry interfaces shared by directory-walking backends.

Defines the capability set a glob matcher consumes. ``VirtualDirectory`` and
``VirtualFile`` implement it over an in-memory path list; a disk-backed
implementation would expose the same members.
"""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class FileSystemEntry(Protocol):
    """Members common to files and directories.

    Attributes:
        full_path: Canonical absolute path of the entry.
        name: Final path segment ("" for the filesystem root).
        parent: Directory containing this entry, or None at the root.
    """

    @property
    def full_path(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def parent(self) -> DirectoryEntry | None: ...


@runtime_checkable
class FileEntry(FileSystemEntry, Protocol):
    """A leaf entry. Read accessors only."""


@runtime_checkable
class DirectoryEntry(FileSystemEntry, Protocol):
    """A directory the matcher can list and navigate.

    Lookups are speculative: ``get_directory`` always returns an entry and a
    missing directory shows up as an empty ``enumerate()``.
    """

    def enumerate(self) -> Iterator[FileEntry | DirectoryEntry]:
        """Yield the immediate children of this directory."""
        ...

    def get_directory(self, name: str) -> DirectoryEntry:
        """Return the directory at ``name`` (``..`` for the parent)."""
        ...

    def get_file(self, path: str) -> FileEntry | None:
        """Return the file at ``path``, or None if there is none."""
        ...
