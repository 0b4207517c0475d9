"""Turning an entry list and its metadata into the two report artifacts."""

from typing import Any, Dict, Iterable, NamedTuple, Optional

from project2md.file_system_tree.entry import Entry
from project2md.output_strategies.json_strategy import JSONOutputStrategy
from project2md.output_strategies.markdown_strategy import MarkdownOutputStrategy
from project2md.report.models import Report, ReportMetadata


class BuiltReport(NamedTuple):
    """The rendered markdown document and the equivalent structured record."""

    markdown: str
    record: Dict[str, Any]


class ReportBuilder:
    """Builds the markdown document and the structured record of a run.

    Building is a pure transformation: no filesystem access, no clock reads (the
    generation time is part of the metadata). Serializing the record to JSON text is
    left to ``serialize_record`` so callers that only need the data can skip it.

    Example:
        >>> from datetime import datetime
        >>> builder = ReportBuilder()
        >>> metadata = ReportMetadata("demo", "/tmp/demo", datetime(2024, 1, 2))
        >>> markdown, record = builder.build([], metadata)
        >>> record["project"]
        'demo'
        >>> markdown.rstrip().endswith("## Project Tree")
        True
    """

    def __init__(
        self,
        markdown_strategy: Optional[MarkdownOutputStrategy] = None,
        json_strategy: Optional[JSONOutputStrategy] = None,
    ) -> None:
        self.markdown_strategy = markdown_strategy or MarkdownOutputStrategy()
        self.json_strategy = json_strategy or JSONOutputStrategy()

    def build(self, entries: Iterable[Entry], metadata: ReportMetadata) -> BuiltReport:
        report = Report(metadata, list(entries))
        return BuiltReport(self.markdown_strategy.render(report), self.json_strategy.to_record(report))

    def serialize_record(self, record: Dict[str, Any]) -> str:
        return self.json_strategy.serialize(record)
