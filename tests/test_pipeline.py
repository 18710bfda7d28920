"""Tests for the cache-or-fetch project load step."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from release_dashboard.cache import CacheStore
from release_dashboard.errors import CacheError, FetchError
from release_dashboard.models import ProjectConfig
from release_dashboard.pipeline import load_project
from release_dashboard.records import build_release

PROJECT = ProjectConfig(id="cli", name="GitHub CLI", repo="cli/cli", base="trunk")


def _fetched():
    return [
        build_release(1, "2024-01-05", "alice"),
        build_release(2, "2024-01-12", "bob"),
        build_release(3, "2024-02-02", "alice"),
    ]


def test_load_project_cache_miss_fetches_and_saves(tmp_path):
    """Verify a miss fetches through the client and persists the result."""
    store = CacheStore(tmp_path)
    client = Mock()
    client.fetch_releases.return_value = _fetched()

    releases = load_project(PROJECT, store, client)

    assert releases == _fetched()
    client.fetch_releases.assert_called_once_with(PROJECT)
    assert store.path_for("cli").is_file()


def test_load_project_reload_after_fetch_is_identical(tmp_path):
    """Verify fetch, save and reload reproduce the same release list."""
    store = CacheStore(tmp_path)
    client = Mock()
    client.fetch_releases.return_value = _fetched()

    fetched = load_project(PROJECT, store, client)
    reloaded = load_project(PROJECT, store, client)

    assert reloaded == fetched
    client.fetch_releases.assert_called_once()


def test_load_project_fresh_bypasses_cache(tmp_path):
    """Verify --fresh re-fetches even when a cache file exists."""
    store = CacheStore(tmp_path)
    store.save("cli", [build_release(9, "2020-01-01", "old")])
    client = Mock()
    client.fetch_releases.return_value = _fetched()

    releases = load_project(PROJECT, store, client, fresh=True)

    assert releases == _fetched()
    assert store.load("cli") == _fetched()


def test_load_project_fetch_error_leaves_cache_untouched(tmp_path):
    """Verify a failed fetch propagates and does not overwrite the cache."""
    store = CacheStore(tmp_path)
    store.save("cli", [build_release(9, "2020-01-01", "old")])
    client = Mock()
    client.fetch_releases.side_effect = FetchError("boom")

    with pytest.raises(FetchError):
        load_project(PROJECT, store, client, fresh=True)

    assert store.load("cli") == [build_release(9, "2020-01-01", "old")]


def test_load_project_corrupt_cache_does_not_fall_back_to_fetch(tmp_path):
    """Verify a corrupt cache file is fatal instead of silently re-fetched."""
    store = CacheStore(tmp_path)
    store.path_for("cli").write_text("garbage\n", encoding="utf-8")
    client = Mock()

    with pytest.raises(CacheError):
        load_project(PROJECT, store, client)

    client.fetch_releases.assert_not_called()
