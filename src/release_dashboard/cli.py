"""Command-line argument parsing for the release dashboard."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for dashboard generation.

    Returns:
        Parsed CLI arguments with ``fresh`` and ``no_open`` flags.
    """
    parser = argparse.ArgumentParser(
        prog="release-dashboard",
        description=(
            "Build a release frequency dashboard from merged GitHub pull requests "
            "for the projects listed in config.yaml."
        ),
    )

    parser.add_argument(
        "--fresh",
        action="store_true",
        help="Ignore cached data/<id>.csv files and re-fetch every project.",
    )
    parser.add_argument(
        "--no-open",
        action="store_true",
        help="Do not open the generated index.html in a browser.",
    )

    return parser.parse_args(argv)
