"""Application entry point for the release frequency dashboard."""

from __future__ import annotations

import logging
import sys
import webbrowser
from typing import List, Optional, Sequence

from .aggregate import aggregate
from .cache import CacheStore
from .cli import parse_args
from .config import DATA_DIR, HTML_FILE, load_config
from .errors import CacheError, ConfigurationError, DataValidationError, FetchError
from .gh_client import GhClient
from .pipeline import load_project
from .report import ProjectPayload, render, write_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIGURATION_ERROR = 1
EXIT_UNEXPECTED_ERROR = 2
EXIT_FETCH_ERROR = 4
EXIT_CACHE_ERROR = 5
EXIT_DATA_ERROR = 6


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(level=level, format="%(levelname)s %(message)s", stream=sys.stderr)


def orchestrate_dashboard_generation(argv: Optional[Sequence[str]] = None) -> int:
    """Run the full load, aggregate and render workflow.

    Projects are processed one at a time. Any failure aborts the run before
    the report is written, leaving a previous report untouched.

    Returns:
        Process exit code.
    """
    try:
        args = parse_args(argv)
        projects = load_config()

        store = CacheStore(DATA_DIR)
        client = GhClient()

        payloads: List[ProjectPayload] = []
        for project in projects:
            releases = load_project(project, store, client, fresh=args.fresh)
            payloads.append(ProjectPayload(config=project, stats=aggregate(releases)))

        path = write_report(render(payloads), HTML_FILE)
        logger.info("Wrote %s (%d projects)", path, len(payloads))

        if not args.no_open:
            webbrowser.open(path.resolve().as_uri())

        return EXIT_OK
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIGURATION_ERROR
    except FetchError as exc:
        logger.error("Fetch failed: %s", exc)
        return EXIT_FETCH_ERROR
    except CacheError as exc:
        logger.error("Cache read failed: %s", exc)
        return EXIT_CACHE_ERROR
    except DataValidationError as exc:
        logger.error("Invalid pull request data: %s", exc)
        return EXIT_DATA_ERROR
    except Exception:
        logger.exception("Unexpected error while generating the dashboard")
        return EXIT_UNEXPECTED_ERROR


def main() -> None:
    """Console script entry point."""
    configure_logging()
    sys.exit(orchestrate_dashboard_generation())


if __name__ == "__main__":
    main()
