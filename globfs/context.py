"""Context variables for path resolution.

Holds the context root that relative input paths are resolved against when
no explicit working directory is given to the normalizer.
"""

import contextvars
from contextlib import contextmanager
from typing import Iterator

# Context variable holding the directory relative paths resolve against
current_root: contextvars.ContextVar[str] = contextvars.ContextVar(
    "globfs_current_root", default="/"
)


@contextmanager
def working_directory(path: str) -> Iterator[str]:
    """Temporarily resolve relative paths against ``path``.

    The path is normalized against the enclosing context root before it is
    installed, so nested blocks may use relative paths too.

    Example::

        with working_directory("/src"):
            root = VirtualDirectory("pkg", ["pkg/a.py"])
        root.full_path  # "/src/pkg"
    """
    from .paths import normalize_path

    token = current_root.set(normalize_path(path))
    try:
        yield current_root.get()
    finally:
        current_root.reset(token)
