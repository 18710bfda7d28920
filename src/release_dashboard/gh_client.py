"""GitHub CLI wrapper for merged pull request retrieval."""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any, List, Sequence

from .errors import FetchError
from .models import ProjectConfig, Release
from .records import normalize

logger = logging.getLogger(__name__)

FETCH_LIMIT = 500


class GhClient:
    """Small client that shells out to an authenticated ``gh`` executable."""

    _JSON_FIELDS = "number,mergedAt,author"

    def __init__(self, executable: str = "gh", limit: int = FETCH_LIMIT) -> None:
        self._executable = executable
        self._limit = limit

    def build_command(self, project: ProjectConfig) -> List[str]:
        """Return the ``gh pr list`` argument vector for a project."""
        return [
            self._executable,
            "pr",
            "list",
            "--repo",
            project.repo,
            "--base",
            project.base,
            "--state",
            "merged",
            "--limit",
            str(self._limit),
            "--json",
            self._JSON_FIELDS,
        ]

    def _run_json(self, command: Sequence[str]) -> Any:
        """Run ``command`` and decode its standard output as JSON.

        Raises:
            FetchError: If the executable is missing, exits non-zero, or
                prints something other than JSON.
        """
        try:
            result = subprocess.run(list(command), capture_output=True, text=True, check=False)
        except FileNotFoundError as exc:
            raise FetchError(
                f"'{self._executable}' was not found. Install the GitHub CLI and run 'gh auth login'."
            ) from exc

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise FetchError(
                f"GitHub CLI failed with exit status {result.returncode}: "
                f"{' '.join(command)}\n{stderr}"
            )

        try:
            return json.loads(result.stdout)
        except ValueError as exc:
            raise FetchError(f"GitHub CLI returned invalid JSON: {' '.join(command)}") from exc

    def list_merged_pull_requests(self, project: ProjectConfig) -> List[dict]:
        """List raw merged pull request records targeting the project's base branch."""
        payload = self._run_json(self.build_command(project))
        if not isinstance(payload, list):
            raise FetchError(
                f"GitHub CLI returned unexpected payload shape for {project.repo}: expected a list."
            )
        return payload

    def fetch_releases(self, project: ProjectConfig) -> List[Release]:
        """Fetch merged pull requests for a project as releases sorted by date.

        Results are capped at the client's limit. Hitting the cap exactly is
        reported as a warning only; no further pages are requested.
        """
        logger.info("Fetching merged PRs to %s on %s...", project.base, project.repo)

        pull_requests = self.list_merged_pull_requests(project)

        if len(pull_requests) == self._limit:
            logger.warning(
                "Got exactly %d results for %s; there may be more. Increase FETCH_LIMIT.",
                self._limit,
                project.name,
                extra={"project_id": project.id},
            )

        logger.info("Fetched %d releases for %s", len(pull_requests), project.name)

        releases = [normalize(item) for item in pull_requests]
        releases.sort(key=lambda release: release.date)
        return releases
