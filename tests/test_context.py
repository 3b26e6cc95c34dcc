"""Tests for the context root used by path resolution."""

import asyncio

import pytest

from globfs import VirtualDirectory, current_root, normalize_path, working_directory


def test_default_context_root():
    """Test relative paths resolve against '/' by default."""
    assert current_root.get() == "/"
    assert VirtualDirectory("a", ["a/b.txt"]).full_path == "/a"


def test_working_directory_sets_and_restores():
    """Test the context manager installs a normalized root and resets it."""
    with working_directory("\\work\\") as root:
        assert root == "/work"
        assert current_root.get() == "/work"
        assert normalize_path("a.txt") == "/work/a.txt"
    assert current_root.get() == "/"


def test_working_directory_nested_relative():
    """Test nested blocks resolve relative to the enclosing root."""
    with working_directory("/work"):
        with working_directory("sub"):
            assert current_root.get() == "/work/sub"
        assert current_root.get() == "/work"


def test_working_directory_restored_on_error():
    """Test the previous root returns even if the block raises."""
    with pytest.raises(RuntimeError):
        with working_directory("/work"):
            raise RuntimeError("boom")
    assert current_root.get() == "/"


def test_explicit_cwd_overrides_context():
    """Test an explicit cwd wins over the context root."""
    with working_directory("/work"):
        root = VirtualDirectory("src", ["src/a.py"], cwd="/other")
    assert root.full_path == "/other/src"


def test_context_is_per_task():
    """Test concurrent tasks keep independent context roots."""

    async def resolve(base: str) -> str:
        with working_directory(base):
            await asyncio.sleep(0)
            return normalize_path("x.txt")

    async def main() -> list[str]:
        return await asyncio.gather(resolve("/one"), resolve("/two"))

    assert asyncio.run(main()) == ["/one/x.txt", "/two/x.txt"]
