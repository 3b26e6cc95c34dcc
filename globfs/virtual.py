"""Virtual directory tree over a flat list of paths.

Provides VirtualDirectory and VirtualFile, which answer directory-walk
queries (list children, parent, named subdirectory, named file) from an
in-memory path collection, so glob matching can run without a disk.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from logging import getLogger as get_logger

from .config import VirtualTreeConfig
from .paths import (
    SEP,
    child_prefix,
    normalize_path,
    parent_path,
    split_name,
)

_logger = get_logger(__name__)


@dataclass(frozen=True)
class VirtualFile:
    """A file entry drawn from a virtual tree's path collection.

    Attributes:
        full_path: Exact entry from the path collection.
        name: Final path segment.
        parent: Directory that produced this entry. Used for lookups only
            and ignored by equality and hashing.
    """

    full_path: str
    parent: VirtualDirectory = field(compare=False, repr=False)
    name: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", split_name(self.full_path))


class VirtualDirectory:
    """Directory view over an immutable collection of absolute paths.

    Directories are implicit: a directory "exists" when some path in the
    collection lies below it, and nothing is checked up front. Children are
    recomputed from the collection on every ``enumerate()`` call.

    All nodes derived from a root share its path tuple by reference; only
    ``enumerate()`` hands subdirectories the smaller tuple of paths below
    them.

    Example:
        >>> root = VirtualDirectory("/r", ["/r/x/1.txt", "/r/x/2.txt", "/r/y.txt"])
        >>> [entry.name for entry in root.enumerate()]
        ['y.txt', 'x']
        >>> root.get_file("y.txt").full_path
        '/r/y.txt'
        >>> root.get_file("missing.txt") is None
        True
    """

    def __init__(
        self,
        root_path: str,
        paths: Iterable[str] | None = None,
        *,
        cwd: str | None = None,
    ):
        """Build a root node, normalizing the root and every path once.

        Args:
            root_path: Directory the view starts at (either separator,
                absolute or relative).
            paths: Paths that exist in the view. None means no paths.
            cwd: Directory relative inputs resolve against. Defaults to the
                current context root.

        Raises:
            InvalidPathError: If the root or any path is empty or malformed.
        """
        full_path = normalize_path(root_path, cwd)
        collection = tuple(normalize_path(p, cwd) for p in paths or ())
        self._set(full_path, collection)
        _logger.debug(
            "built virtual tree at %s with %d paths", full_path, len(collection)
        )

    @classmethod
    def from_config(
        cls, config: VirtualTreeConfig, paths: Iterable[str] | None = None
    ) -> VirtualDirectory:
        """Build a root node from a VirtualTreeConfig."""
        return cls(config.root, paths, cwd=config.cwd)

    @classmethod
    def _derived(cls, full_path: str, paths: tuple[str, ...]) -> VirtualDirectory:
        # Inputs are already normalized; skip straight to assignment
        node = cls.__new__(cls)
        node._set(full_path, paths)
        return node

    def _set(self, full_path: str, paths: tuple[str, ...]) -> None:
        self._full_path = full_path
        self._name = split_name(full_path)
        self._paths = paths

    @property
    def full_path(self) -> str:
        """Canonical absolute path of this directory."""
        return self._full_path

    @property
    def name(self) -> str:
        """Final path segment ("" for the root)."""
        return self._name

    @property
    def paths(self) -> tuple[str, ...]:
        """The path collection this node reads from."""
        return self._paths

    @property
    def parent(self) -> VirtualDirectory | None:
        """Directory one level up, or None at the filesystem root.

        Pure string operation on ``full_path``; the parent shares this
        node's path collection.
        """
        path = parent_path(self._full_path)
        if path is None:
            return None
        return self._derived(path, self._paths)

    def enumerate(self) -> Iterator[VirtualFile | VirtualDirectory]:
        """Yield the immediate children of this directory.

        Files are yielded first, in collection order. Subdirectories follow
        in order of first appearance, each holding only the paths below it.
        A directory with no matching paths yields nothing.
        """
        prefix = child_prefix(self._full_path)
        start = len(prefix)
        groups: dict[str, list[str]] = {}

        for path in self._paths:
            if len(path) <= start or not path.startswith(prefix):
                continue

            end = path.find(SEP, start)
            if end == -1:
                yield VirtualFile(path, parent=self)
            else:
                groups.setdefault(path[:end], []).append(path)

        for directory, members in groups.items():
            yield self._derived(directory, tuple(members))

    def walk(
        self,
    ) -> Iterator[tuple[VirtualDirectory, list[VirtualDirectory], list[VirtualFile]]]:
        """Walk the tree top-down, like os.walk().

        Yields ``(directory, subdirectories, files)`` for this node and every
        directory below it. Removing items from ``subdirectories`` in place
        prunes the walk.
        """
        directories: list[VirtualDirectory] = []
        files: list[VirtualFile] = []
        for entry in self.enumerate():
            if isinstance(entry, VirtualFile):
                files.append(entry)
            else:
                directories.append(entry)

        yield self, directories, files

        for directory in directories:
            yield from directory.walk()

    def iter_files(self) -> Iterator[VirtualFile]:
        """Yield every file below this directory, at any depth."""
        for _, _, files in self.walk():
            yield from files

    def get_directory(self, name: str) -> VirtualDirectory:
        """Return the directory at ``name``.

        ``..`` moves up exactly one level. Absolute names are used as given
        and relative names are resolved below this directory. The result is
        always normalized and shares this node's path collection. The
        directory does not have to exist: a missing one enumerates empty.

        Args:
            name: Directory name or path, either separator.

        Returns:
            VirtualDirectory for the resolved path.

        Raises:
            InvalidPathError: If ``name`` is empty or malformed.
        """
        return self._derived(normalize_path(name, self._full_path), self._paths)

    def get_file(self, path: str) -> VirtualFile | None:
        """Look up a file by exact path.

        Relative paths are resolved below this directory. Matching is exact
        and case-sensitive.

        Args:
            path: File path, either separator.

        Returns:
            VirtualFile with this directory as parent, or None if the path
            is not in the collection.
        """
        target = normalize_path(path, self._full_path)
        for entry in self._paths:
            if entry == target:
                return VirtualFile(entry, parent=self)

        _logger.debug("no file %s under %s", target, self._full_path)
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VirtualDirectory):
            return NotImplemented
        # Same position over the same collection
        return self._full_path == other._full_path and self._paths is other._paths

    def __hash__(self) -> int:
        return hash((VirtualDirectory, self._full_path, id(self._paths)))

    def __repr__(self) -> str:
        return f"VirtualDirectory({self._full_path!r}, paths={len(self._paths)})"
