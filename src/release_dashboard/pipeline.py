"""Per-project load step: cached releases first, GitHub CLI on miss."""

from __future__ import annotations

import logging
from typing import List

from .cache import CacheStore
from .gh_client import GhClient
from .models import ProjectConfig, Release

logger = logging.getLogger(__name__)


def load_project(
    project: ProjectConfig,
    store: CacheStore,
    client: GhClient,
    fresh: bool = False,
) -> List[Release]:
    """Return a project's releases from its cache file or a fresh fetch.

    The cache is consulted unless ``fresh`` is set. On a miss or a forced
    refresh the releases are fetched and the cache file is overwritten
    before returning.
    """
    if not fresh:
        cached = store.load(project.id)
        if cached is not None:
            logger.info("[%s] Using cached %s", project.name, store.path_for(project.id))
            return cached

    releases = client.fetch_releases(project)
    path = store.save(project.id, releases)
    logger.info(
        "[%s] Wrote %s (%d releases)",
        project.name,
        path,
        len(releases),
        extra={"project_id": project.id},
    )
    return releases
