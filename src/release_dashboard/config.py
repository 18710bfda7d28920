"""Configuration loading and validation for the release dashboard."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, List

import yaml

from .errors import ConfigurationError
from .models import ProjectConfig

CONFIG_FILE = Path("config.yaml")
EXAMPLE_CONFIG_FILE = Path("config.example.yaml")
DATA_DIR = Path("data")
HTML_FILE = Path("index.html")

_PROJECT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
_REPO_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")
_REQUIRED_KEYS = ("id", "name", "repo", "base")


def validate_projects(entries: Any) -> List[ProjectConfig]:
    """Validate raw project entries and build ``ProjectConfig`` instances.

    Args:
        entries: The ``projects`` value read from the configuration file.

    Returns:
        Projects in configuration order.

    Raises:
        ConfigurationError: If the list is empty or an entry is malformed.
    """
    if not entries:
        raise ConfigurationError(f"No projects defined in {CONFIG_FILE}.")
    if not isinstance(entries, list):
        raise ConfigurationError(f"'projects' in {CONFIG_FILE} must be a list.")

    projects: List[ProjectConfig] = []
    seen_ids = set()

    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Project entry #{index + 1} must be a mapping.")

        missing = [key for key in _REQUIRED_KEYS if not str(entry.get(key) or "").strip()]
        if missing:
            raise ConfigurationError(
                f"Project entry #{index + 1} is missing required keys: {', '.join(missing)}."
            )

        project = ProjectConfig(
            id=str(entry["id"]).strip(),
            name=str(entry["name"]).strip(),
            repo=str(entry["repo"]).strip(),
            base=str(entry["base"]).strip(),
        )

        if not _PROJECT_ID_PATTERN.match(project.id):
            raise ConfigurationError(
                f"Invalid project id {project.id!r}: use letters, digits, '-' or '_' only."
            )
        if project.id in seen_ids:
            raise ConfigurationError(f"Duplicate project id {project.id!r}.")
        if not _REPO_PATTERN.match(project.repo):
            raise ConfigurationError(
                f"Invalid repo {project.repo!r} for project {project.id!r}: expected 'owner/name'."
            )

        seen_ids.add(project.id)
        projects.append(project)

    return projects


def load_config(path: Path = CONFIG_FILE) -> List[ProjectConfig]:
    """Read the YAML configuration file and return the configured projects.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, or
            defines no valid projects.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigurationError(
            f"{path} not found. Copy the example and edit it:\n\n"
            f"  cp {EXAMPLE_CONFIG_FILE} {path}\n"
        ) from exc

    try:
        document = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(document, dict):
        raise ConfigurationError(f"{path} must contain a mapping with a 'projects' list.")

    return validate_projects(document.get("projects"))
