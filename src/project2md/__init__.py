"""Project documentation utilities.

This package walks a project's file tree and renders a snapshot of its layout,
dependency manifest and environment versions as markdown and JSON.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("project2md")
except PackageNotFoundError:
    __version__ = "unknown"
