"""Tests for cache utilities module."""

from __future__ import annotations

import os
import time
from pathlib import Path
from unittest.mock import patch

import pytest

from cattree.cache_utils import (
    cache_file_for,
    discard_async,
    is_cache_fresh,
    mkdir_async,
    read_text_async,
    replace_text_async,
)


class TestIsCacheFresh:
    """Tests for is_cache_fresh function."""

    def test_returns_false_when_path_missing(self, tmp_path: Path) -> None:
        """Returns False when file does not exist."""
        path = tmp_path / "nonexistent"
        assert not is_cache_fresh(path, ttl_seconds=86400)

    def test_returns_true_when_file_is_new(self, tmp_path: Path) -> None:
        """Returns True when file is within TTL."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        assert is_cache_fresh(path, ttl_seconds=86400)

    def test_returns_false_when_file_is_old(self, tmp_path: Path) -> None:
        """Returns False when file is older than TTL."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        # Set mtime to be very old
        old_time = time.time() - 100000
        os.utime(path, (old_time, old_time))

        assert not is_cache_fresh(path, ttl_seconds=1)

    def test_returns_true_when_ttl_is_zero(self, tmp_path: Path) -> None:
        """Returns True when TTL is 0 (cache forever)."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        # Set mtime to be very old
        old_time = time.time() - 100000
        os.utime(path, (old_time, old_time))

        assert is_cache_fresh(path, ttl_seconds=0)

    def test_returns_true_when_ttl_is_negative(self, tmp_path: Path) -> None:
        """Returns True when TTL is negative (cache forever)."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        # Set mtime to be very old
        old_time = time.time() - 100000
        os.utime(path, (old_time, old_time))

        assert is_cache_fresh(path, ttl_seconds=-1)


class TestCacheFileFor:
    """Tests for cache_file_for function."""

    def test_is_json_file_under_base(self, tmp_path: Path) -> None:
        """Places the cache file directly under the base path."""
        result = cache_file_for("http://api.local/categories/tree", tmp_path)
        assert result.parent == tmp_path
        assert result.suffix == ".json"

    def test_same_url_same_file(self, tmp_path: Path) -> None:
        """Is stable for a given URL."""
        url = "http://api.local/categories/tree"
        assert cache_file_for(url, tmp_path) == cache_file_for(url, tmp_path)

    def test_different_urls_different_files(self, tmp_path: Path) -> None:
        """Separates forests served by different hosts."""
        first = cache_file_for("http://staging.local/categories/tree", tmp_path)
        second = cache_file_for("http://prod.local/categories/tree", tmp_path)
        assert first != second

    def test_url_is_not_used_as_path(self, tmp_path: Path) -> None:
        """Slashes in the URL never create subdirectories."""
        result = cache_file_for("http://api.local/../../etc", tmp_path)
        assert "/" not in result.name


class TestReadTextAsync:
    """Tests for read_text_async function."""

    @pytest.mark.asyncio
    async def test_reads_text_content(self, tmp_path: Path) -> None:
        """Reads text content from file."""
        path = tmp_path / "test.txt"
        path.write_text("Hello, World!", encoding="utf-8")

        result = await read_text_async(path)

        assert result == "Hello, World!"


class TestReplaceTextAsync:
    """Tests for replace_text_async function."""

    @pytest.mark.asyncio
    async def test_writes_text_content(self, tmp_path: Path) -> None:
        """Writes text content to file."""
        path = tmp_path / "test.txt"

        await replace_text_async(path, "Hello, World!")

        assert path.read_text(encoding="utf-8") == "Hello, World!"

    @pytest.mark.asyncio
    async def test_replaces_existing_file_without_leftovers(self, tmp_path: Path) -> None:
        """Overwrites the target and leaves no temporary file behind."""
        path = tmp_path / "tree.json"
        path.write_text("old", encoding="utf-8")

        await replace_text_async(path, "new")

        assert path.read_text(encoding="utf-8") == "new"
        assert [p.name for p in tmp_path.iterdir()] == ["tree.json"]

    @pytest.mark.asyncio
    async def test_failed_write_keeps_previous_content(self, tmp_path: Path) -> None:
        """A write that fails before the rename leaves the old file intact."""
        path = tmp_path / "tree.json"
        path.write_text("old", encoding="utf-8")

        with patch("pathlib.Path.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                await replace_text_async(path, "new")

        assert path.read_text(encoding="utf-8") == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["tree.json"]


class TestDiscardAsync:
    """Tests for discard_async function."""

    @pytest.mark.asyncio
    async def test_removes_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tree.json"
        path.write_text("{}", encoding="utf-8")

        await discard_async(path)

        assert not path.exists()

    @pytest.mark.asyncio
    async def test_missing_file_is_ignored(self, tmp_path: Path) -> None:
        await discard_async(tmp_path / "missing.json")



class TestMkdirAsync:
    """Tests for mkdir_async function."""

    @pytest.mark.asyncio
    async def test_creates_directory(self, tmp_path: Path) -> None:
        """Creates a new directory."""
        path = tmp_path / "new_dir"

        await mkdir_async(path)

        assert path.exists()
        assert path.is_dir()

    @pytest.mark.asyncio
    async def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Creates parent directories when parents=True."""
        path = tmp_path / "a" / "b" / "c"

        await mkdir_async(path, parents=True)

        assert path.exists()
        assert path.is_dir()

    @pytest.mark.asyncio
    async def test_raises_when_parents_not_exist(self, tmp_path: Path) -> None:
        """Raises when parents don't exist and parents=False."""
        path = tmp_path / "a" / "b" / "c"

        with pytest.raises(FileNotFoundError):
            await mkdir_async(path)

    @pytest.mark.asyncio
    async def test_exists_ok_ignores_existing(self, tmp_path: Path) -> None:
        """Does not raise when directory exists and exist_ok=True."""
        path = tmp_path / "existing"
        path.mkdir()

        # Should not raise
        await mkdir_async(path, exist_ok=True)

        assert path.exists()

