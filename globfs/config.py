"""Configuration for virtual trees.

Provides the configuration dataclass and the connect_tree factory used to
describe where a virtual tree is rooted and how relative paths resolve.
"""

from dataclasses import dataclass
from typing import Literal


@dataclass
class VirtualTreeConfig:
    """Configuration for an in-memory directory view.

    Attributes:
        type: Always "virtual".
        root: Directory the traversal starts from.
        cwd: Absolute directory that relative input paths resolve against.
            None means the current context root.
    """

    type: Literal["virtual"] = "virtual"
    root: str = "/"
    cwd: str | None = None


def connect_tree(
    type: Literal["virtual"] = "virtual",
    **kwargs,
) -> VirtualTreeConfig:
    """Configure a virtual tree.

    Args:
        type: Tree type. Only "virtual" (a view over a list of path
            strings) is supported.
        **kwargs: Additional configuration.
            - root (str): Optional. Traversal root (default: "/").
            - cwd (str): Optional. Absolute directory for resolving
              relative paths (default: the current context root).

    Returns:
        VirtualTreeConfig for VirtualDirectory.from_config().

    Examples:
        >>> connect_tree(root="/project")
        VirtualTreeConfig(type='virtual', root='/project', cwd=None)

        >>> connect_tree(root="src", cwd="/project")
        VirtualTreeConfig(type='virtual', root='src', cwd='/project')
    """
    if type != "virtual":
        raise ValueError(f"Unsupported tree type: {type}. Use 'virtual'.")

    root = kwargs.pop("root", "/")
    cwd = kwargs.pop("cwd", None)

    if kwargs:
        raise ValueError(f"Unexpected arguments for virtual tree: {list(kwargs.keys())}")

    if not root:
        raise ValueError("Virtual tree requires a non-empty 'root'")

    if cwd is not None and not cwd.replace("\\", "/").startswith("/"):
        raise ValueError(f"'cwd' must be an absolute path: {cwd!r}")

    return VirtualTreeConfig(root=root, cwd=cwd)
