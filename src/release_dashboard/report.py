"""HTML dashboard rendering for aggregated release statistics."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Sequence

from jinja2 import Environment, PackageLoader, select_autoescape

from .models import ProjectConfig, ProjectStats

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "dashboard.html.j2"
CHART_JS_URL = "https://cdn.jsdelivr.net/npm/chart.js@4"
DATALABELS_JS_URL = "https://cdn.jsdelivr.net/npm/chartjs-plugin-datalabels@2"


@dataclass(frozen=True)
class ProjectPayload:
    """Pairs a configured project with its aggregated statistics."""

    config: ProjectConfig
    stats: ProjectStats


def build_dashboard_data(payloads: Sequence[ProjectPayload]) -> Dict[str, Any]:
    """Build the mapping embedded in the page.

    Projects are keyed by id; ``projectOrder`` carries the tab order
    separately because the page does not rely on object key order.
    """
    projects: Dict[str, Any] = {}
    for payload in payloads:
        entry: Dict[str, Any] = {
            "name": payload.config.name,
            "repo": payload.config.repo,
            "base": payload.config.base,
        }
        entry.update(payload.stats.to_payload())
        projects[payload.config.id] = entry

    return {
        "projects": projects,
        "projectOrder": [payload.config.id for payload in payloads],
    }


def _environment() -> Environment:
    return Environment(
        loader=PackageLoader("release_dashboard", "templates"),
        autoescape=select_autoescape(["html", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render(payloads: Sequence[ProjectPayload]) -> str:
    """Render the self-contained dashboard document for all projects."""
    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(
        payloads=payloads,
        dashboard_data=build_dashboard_data(payloads),
        chart_js_url=CHART_JS_URL,
        datalabels_js_url=DATALABELS_JS_URL,
    )


def write_report(html: str, path: Path) -> Path:
    """Write the rendered document, replacing any previous report."""
    path.write_text(html, encoding="utf-8")
    logger.info("Wrote %s", path, extra={"bytes": len(html)})
    return path
