"""Command-line argument parsing for project2md.

This module defines the command-line interface for project2md,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from project2md import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with project2md's options.
    """
    description = """
    project2md: Documents a project's layout and environment as markdown and JSON.

    The tool walks the project directory and writes a markdown report listing every
    directory and file with its size and modification time, together with the
    runtime, framework and database versions and the packages pinned by the project's
    lock file. An equivalent JSON report is written next to the markdown file.

    Key Features:
    - Directories listed before files, both in natural case-insensitive order
    - Aggregated directory sizes
    - Literal-name exclusions (defaults from configuration, extendable with -e)
    - Optional gitignore-style pattern exclusions (-i)
    - Depth limiting
    - Package tables from composer.lock, poetry.lock or uv.lock
    - Optional database version lookup (requires the 'database' extra)
    """

    epilog = """
    Examples:
      # Document the project containing the current directory
      project2md

      # Document a specific directory into a specific file
      project2md /path/to/project -o docs/structure.md

      # Exclude additional names (exact names, no wildcards)
      project2md -e .cache -e fixtures

      # Exclude by gitignore-style pattern
      project2md -i "*.log" -i "*.pyc"

      # Only list two levels
      project2md -d 1

      # Print the markdown report to stdout only
      project2md -o - --no-json

      # Use settings from a YAML file
      project2md -c project2md.yaml

      # Report the framework and database versions
      project2md --framework django --database-url postgresql://localhost/app
    """

    parser = argparse.ArgumentParser(
        prog="project2md",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"project2md {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        help=(
            "The project directory to document (default: the nearest ancestor of the working "
            "directory that looks like a project root)."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help=(
            "Markdown output file (default: project-structure.md). The JSON report is written to the "
            "same path with a .json extension. Use '-' to print the markdown report to stdout."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="NAME",
        action="append",
        default=[],
        help=(
            "Additional file or directory name to exclude, matched literally against entry names "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        action="append",
        default=[],
        help=(
            "Gitignore-style pattern matched against entry names, e.g. '*.log' or 'build/' "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-d",
        "--depth",
        metavar="N",
        help=(
            "Maximum depth to list; 0 lists only the top level. Values that are not non-negative "
            "integers mean unbounded (the default)."
        ),
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="FILE",
        help="YAML configuration file (default: project2md.yaml in the project root, if present).",
    )
    parser.add_argument(
        "--no-json",
        action="store_true",
        help="Do not write the JSON report.",
    )
    parser.add_argument(
        "--no-packages",
        action="store_true",
        help="Do not read the lock file or list packages.",
    )
    parser.add_argument(
        "--framework",
        metavar="DIST",
        help="Distribution name of the project's framework whose version is reported (e.g. django).",
    )
    parser.add_argument(
        "--database-url",
        metavar="URL",
        help="SQLAlchemy URL of the project's database, used to report the server version.",
    )
    parser.add_argument(
        "--project-type",
        metavar="TEXT",
        help="Description of the project shown in the report banner.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries and unavailable collaborators to stderr.",
    )

    return parser
