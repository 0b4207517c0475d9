"""Command-line interface for project2md."""
