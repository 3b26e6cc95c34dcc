"""Path normalization for the virtual tree.

Every path stored in or compared against a virtual tree goes through
``normalize_path`` so that exact-match lookup and prefix grouping can be done
with plain string operations.
"""

from __future__ import annotations

import posixpath

from .context import current_root

SEP = "/"
ALTSEP = "\\"


class InvalidPathError(ValueError):
    """Raised for empty or malformed path strings."""

    def __init__(self, path: object, reason: str):
        super().__init__(f"Invalid path {path!r}: {reason}")
        self.path = path
        self.reason = reason


def normalize_path(path: str, cwd: str | None = None) -> str:
    """Convert a raw path into the canonical absolute form.

    Both separators are accepted on input; the result uses ``/`` only, has no
    trailing separator (except for the root itself) and no ``.`` or ``..``
    segments.

    Args:
        path: Raw path, absolute or relative, using either separator.
        cwd: Directory to resolve relative paths against. Defaults to the
            current context root (see ``globfs.context.current_root``).

    Returns:
        Canonical absolute path, e.g. ``"/a/b/c.txt"``.

    Raises:
        InvalidPathError: If the path is not a string, is empty or blank,
            or contains a NUL character.
    """
    if not isinstance(path, str):
        raise InvalidPathError(path, "expected a string")
    if not path.strip():
        raise InvalidPathError(path, "path is empty")
    if "\x00" in path:
        raise InvalidPathError(path, "embedded null character")

    path = path.replace(ALTSEP, SEP)
    if not path.startswith(SEP):
        base = current_root.get() if cwd is None else cwd
        base = base.replace(ALTSEP, SEP)
        if not base.startswith(SEP):
            raise InvalidPathError(base, "working directory must be absolute")
        path = f"{base}{SEP}{path}"

    path = posixpath.normpath(path)
    # normpath keeps a leading "//" (implementation-defined on POSIX)
    if path.startswith(SEP * 2):
        path = SEP + path.lstrip(SEP)
    return path


def split_name(path: str) -> str:
    """Return the final segment of a normalized path ("" for the root)."""
    return path.rsplit(SEP, 1)[-1]


def parent_path(path: str) -> str | None:
    """Return the parent of a normalized path, or None for the root."""
    if path == SEP:
        return None
    head = path.rsplit(SEP, 1)[0]
    return head or SEP


def child_prefix(directory: str) -> str:
    """Return the string every child of ``directory`` starts with."""
    return directory if directory.endswith(SEP) else directory + SEP

