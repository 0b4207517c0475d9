"""JSON output strategy for project reports.

This module provides a strategy for rendering a report as a single JSON document that
carries the same information as the markdown report as typed fields.
"""

import json
import posixpath
from dataclasses import asdict
from typing import Any, Dict, Iterable, Iterator, Tuple

from anytree.exporter import DictExporter

from project2md.file_system_tree.file_system_node import FileSystemNode
from project2md.report.formatting import format_generated, format_modified
from project2md.report.models import Report
from project2md.types import EntryType

from .base_strategy import OutputStrategy

# Node attribute name -> key in the exported tree
_TREE_KEYS = {
    "name": "name",
    "type": "type",
    "relative_path": "path",
    "size_bytes": "size",
    "modified": "modified",
}


def _tree_attributes(attributes: Iterable[Tuple[str, Any]]) -> Iterator[Tuple[str, Any]]:
    for key, value in attributes:
        if key in _TREE_KEYS:
            yield _TREE_KEYS[key], value


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that renders a report as a JSON document.

    The document has the following structure:
    {
        "project": "name",
        "path": "/scanned/root",
        "type": "Software Project",
        "generated": "2024-01-02 03:04:05",
        "by": "project2md 1.0.0",
        "versions": {"framework_name": "...", "framework": "...", "runtime": "...", "database": "..."},
        "packages": [{"name": "...", "version": "..."}],
        "discoverable": [{"name": "...", "version": "...", "providers": [...], "aliases": {...}}],
        "files": [{"type": "dir", "path": "src", "size": 100, "modified": "2024-01-02 03:04"}],
        "tree": {"name": "project", "type": "dir", "path": "", "size": 150, "children": [...]}
    }

    ``files`` is the flat entry list in report order; ``tree`` holds the same entries
    nested by directory. Non-ASCII text is written as-is.

    Attributes:
        indent: Indentation used for pretty printing.

    Example:
        >>> from datetime import datetime
        >>> from project2md.file_system_tree.entry import Entry
        >>> from project2md.report.models import ReportMetadata
        >>> metadata = ReportMetadata("demo", "/tmp/demo", datetime(2024, 1, 2, 3, 4, 5))
        >>> report = Report(metadata, [Entry(EntryType.FILE, "README.md", 50)])
        >>> record = JSONOutputStrategy().to_record(report)
        >>> record["files"]
        [{'type': 'file', 'path': 'README.md', 'size': 50, 'modified': None}]
        >>> record["tree"]["children"][0]["name"]
        'README.md'
    """

    def __init__(self, indent: int = 4) -> None:
        self.indent = indent
        self._exporter = DictExporter(attriter=_tree_attributes)

    def to_record(self, report: Report) -> Dict[str, Any]:
        """Build the structured record of a report as plain JSON-compatible data."""
        metadata = report.metadata
        versions = metadata.versions
        return {
            "project": metadata.project_name,
            "path": metadata.root_path,
            "type": metadata.project_type,
            "generated": format_generated(metadata.generated_at),
            "by": metadata.generator,
            "versions": {
                "framework_name": versions.framework_name,
                "framework": versions.framework,
                "runtime": versions.runtime,
                "database": versions.database,
            },
            "packages": [asdict(package) for package in metadata.packages],
            "discoverable": [asdict(package) for package in metadata.discoverable],
            "files": [
                {
                    "type": entry.entry_type.value,
                    "path": entry.relative_path,
                    "size": entry.size_bytes,
                    "modified": format_modified(entry.modified_at),
                }
                for entry in report.entries
            ],
            "tree": self._exporter.export(self.build_tree(report)),
        }

    def build_tree(self, report: Report) -> FileSystemNode:
        """Nest the report's entries under a root node named after the project.

        Entries must be in walk order (every directory before its descendants). The root
        node's size is the sum of the top-level entries.
        """
        root = FileSystemNode(
            report.metadata.project_name,
            entry_type=EntryType.DIR,
            size_bytes=sum(entry.size_bytes for entry in report.entries if entry.depth == 0),
        )
        directories = {"": root}
        for entry in report.entries:
            parent = directories.get(posixpath.dirname(entry.relative_path), root)
            node = FileSystemNode(
                entry.name,
                parent=parent,
                entry_type=entry.entry_type,
                relative_path=entry.relative_path,
                size_bytes=entry.size_bytes,
                modified=format_modified(entry.modified_at),
            )
            if entry.is_dir:
                directories[entry.relative_path] = node
        return root

    def serialize(self, record: Dict[str, Any]) -> str:
        """Serialize a record built by to_record."""
        return json.dumps(record, indent=self.indent, ensure_ascii=False) + "\n"

    def render(self, report: Report) -> str:
        return self.serialize(self.to_record(report))

    def get_file_extension(self) -> str:
        return ".json"
