"""Command-line interface for project2md.

This module provides the ``project2md`` command, which documents a project directory
as a markdown report and an accompanying JSON report. It resolves the project root
and configuration, runs the documentation pass and writes the artifacts.

Exit Codes:
    0: Successful completion
    1: The project path does not exist or is not a directory, the configuration file is
       unusable, or an output file could not be written
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe while printing the report to stdout

Example:
    # Document the current project
    $ project2md

    # Document another directory with extra exclusions and a depth limit
    $ project2md /path/to/project -e fixtures -d 2
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from project2md.cli.argparser import create_parser
from project2md.cli.report_writer import ReportWriter
from project2md.config import DocumentationConfig, discover_config, load_config, parse_depth
from project2md.exceptions import ConfigurationError, InvalidRootError
from project2md.project2md import ProjectDocumenter, find_project_root
from project2md.report.builder import ReportBuilder

DEFAULT_OUTPUT = "project-structure.md"


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, warnings only otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def resolve_config(args: argparse.Namespace, root: Path) -> DocumentationConfig:
    """Combine the configuration file with command-line overrides.

    Raises:
        ConfigurationError: If an explicitly requested configuration file is unusable.
    """
    if args.config is not None:
        config = load_config(args.config)
    elif root.is_dir():
        config = discover_config(root)
    else:
        config = DocumentationConfig()

    config = config.with_overrides(
        framework=args.framework,
        database_url=args.database_url,
        project_type=args.project_type,
        output=args.output,
    )
    if args.no_json:
        config = config.model_copy(update={"json_enabled": False})
    if args.no_packages:
        config = config.model_copy(update={"include_package_info": False})
    if args.depth is not None:
        config = config.model_copy(update={"max_depth": parse_depth(args.depth)})
    return config


def run(args: argparse.Namespace) -> int:
    """Document a project according to parsed arguments.

    Returns:
        The number of entries written.

    Raises:
        InvalidRootError: If the project path is not a directory.
        ConfigurationError: If the configuration file is unusable.
        OSError: If an output file cannot be written.
    """
    root = args.path if args.path is not None else find_project_root()
    config = resolve_config(args, root)

    builder = ReportBuilder()
    writer = ReportWriter(
        config.output or DEFAULT_OUTPUT,
        json_enabled=config.json_enabled,
        markdown_extension=builder.markdown_strategy.get_file_extension(),
        structured_extension=builder.json_strategy.get_file_extension(),
    )

    # The report never lists its own artifacts
    documenter = ProjectDocumenter(
        root,
        config=config,
        extra_excludes=args.exclude,
        ignore_patterns=args.ignore,
        builder=builder,
        excluded_files=writer.output_paths(),
    )
    built = documenter.build()

    structured: Optional[str] = documenter.serialize_record(built) if writer.json_path is not None else None
    writer.write(built.markdown, structured)

    if writer.markdown_path is not None:
        print(f"Wrote markdown to: {writer.markdown_path}", file=sys.stderr)
    if structured is not None:
        print(f"Wrote JSON to: {writer.json_path}", file=sys.stderr)
    entry_count = len(documenter.collect_entries())
    print(f"Entries written: {entry_count}", file=sys.stderr)
    return entry_count


def main() -> None:
    """Main entry point for the project2md command-line interface.

    Exit codes:
        0: Successful completion
        1: Invalid project path, unusable configuration or unwritable output
        2: Command-line syntax error (raised by argparse)
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe while printing to stdout
    """
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        run(args)
    except (InvalidRootError, ConfigurationError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except BrokenPipeError:
        # Keep the interpreter from reporting the closed pipe again at shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except OSError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
