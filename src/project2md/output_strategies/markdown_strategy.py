"""Markdown output strategy for project reports.

The markdown document is meant to be read by people and committed next to the code.
Its sections always appear in the same order: title, generation banner, versions,
packages, discoverable packages and finally the project tree.
"""

from typing import List

from project2md.file_system_tree.entry import Entry
from project2md.report.formatting import format_bytes, format_generated, format_modified
from project2md.report.models import DiscoverablePackage, PackageInfo, Report

from .base_strategy import OutputStrategy

PLACEHOLDER = "?"


class MarkdownOutputStrategy(OutputStrategy):
    """Output strategy that renders a report as a markdown document.

    Optional sections (packages, discoverable packages) are left out entirely when
    there is nothing to show. Each entry of the tree becomes one list item of the form
    ``- name — `size` — _modified: time_``; directories are bold and end with ``/``,
    and a size of zero or an unknown time is shown as ``?``.

    Example:
        >>> from datetime import datetime
        >>> from project2md.report.models import ReportMetadata
        >>> from project2md.types import EntryType
        >>> metadata = ReportMetadata("demo", "/tmp/demo", datetime(2024, 1, 2, 3, 4, 5))
        >>> report = Report(metadata, [Entry(EntryType.DIR, "src", 2048)])
        >>> MarkdownOutputStrategy().render(report).splitlines()[0]
        '# Project structure for `demo`'
        >>> MarkdownOutputStrategy().format_entry(Entry(EntryType.DIR, "src", 2048))
        '- **src/** — `2 KB` — _modified: ?_'
    """

    def render(self, report: Report) -> str:
        metadata = report.metadata
        versions = metadata.versions

        lines = [
            f"# Project structure for `{metadata.project_name}`",
            "",
            f"> Project Type: {metadata.project_type}",
            f"> Generated: {format_generated(metadata.generated_at)}",
            f"> Generated By: {metadata.generator}",
            "",
            "## Versions",
            f"- {versions.framework_name}: **{versions.framework}**",
            f"- {versions.runtime_name}: **{versions.runtime}**",
            f"- Database: **{versions.database}**",
            "",
        ]

        if metadata.packages:
            lines.extend(self.format_packages(metadata.packages))
            lines.append("")

        if metadata.discoverable:
            lines.extend(self.format_discoverable(metadata.discoverable))
            lines.append("")

        lines.append("## Project Tree")
        lines.extend(self.format_entry(entry) for entry in report.entries)
        return "\n".join(lines) + "\n"

    def format_packages(self, packages: List[PackageInfo]) -> List[str]:
        lines = ["## Packages", "| Package | Version |", "|---------|---------|"]
        lines.extend(f"| {package.name} | {package.version} |" for package in packages)
        return lines

    def format_discoverable(self, packages: List[DiscoverablePackage]) -> List[str]:
        lines = ["## Discoverable Packages"]
        for package in packages:
            lines.append(f"- **{package.name}** `{package.version}`")
            if package.providers:
                lines.append("  - Providers:")
                lines.extend(f"    - `{provider}`" for provider in package.providers)
            if package.aliases:
                lines.append("  - Aliases:")
                lines.extend(f"    - `{alias}` → `{target}`" for alias, target in package.aliases.items())
        return lines

    def format_entry(self, entry: Entry) -> str:
        """Render one tree entry as a markdown list item."""
        name = f"**{entry.name}/**" if entry.is_dir else entry.name
        size = format_bytes(entry.size_bytes) if entry.size_bytes else PLACEHOLDER
        modified = format_modified(entry.modified_at) or PLACEHOLDER
        return f"- {name} — `{size}` — _modified: {modified}_"

    def get_file_extension(self) -> str:
        return ".md"
