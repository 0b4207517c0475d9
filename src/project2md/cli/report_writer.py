"""Persisting the rendered reports.

This module writes the markdown and JSON artifacts of a run to disk, or streams the
markdown report to stdout.
"""

import sys
from pathlib import Path
from typing import List, Optional, TextIO, Union

STDOUT = "-"


def structured_output_path(markdown_path: Path, extension: str = ".json", markdown_extension: str = ".md") -> Path:
    """Path of the structured report that accompanies a markdown report.

    A markdown suffix is replaced (case-insensitively); any other name gets the
    extension appended, so the two artifacts never share a path.

    Example:
        >>> structured_output_path(Path("docs/structure.md")).as_posix()
        'docs/structure.json'
        >>> structured_output_path(Path("structure.txt")).as_posix()
        'structure.txt.json'
        >>> structured_output_path(Path("structure.markdown"), ".yaml", ".markdown").as_posix()
        'structure.yaml'
    """
    if markdown_path.suffix.lower() == markdown_extension.lower():
        return markdown_path.with_suffix(extension)
    return markdown_path.with_name(markdown_path.name + extension)


class ReportWriter:
    """Writes the report artifacts of a run.

    Files are written as UTF-8, creating missing parent directories. When the output is
    ``-`` the markdown report goes to stdout and no JSON file is written.

    Attributes:
        output: Markdown destination, a path or ``-`` for stdout.
        json_enabled: Whether the JSON artifact is written.
        markdown_extension: File extension of the markdown output strategy.
        structured_extension: File extension of the structured output strategy.
        stream: Stream used for ``-``; defaults to sys.stdout at write time.
    """

    def __init__(
        self,
        output: Union[str, Path],
        json_enabled: bool = True,
        stream: Optional[TextIO] = None,
        markdown_extension: str = ".md",
        structured_extension: str = ".json",
    ) -> None:
        self.output = output
        self.json_enabled = json_enabled
        self.markdown_extension = markdown_extension
        self.structured_extension = structured_extension
        self._stream = stream

    @property
    def to_stdout(self) -> bool:
        return str(self.output) == STDOUT

    @property
    def markdown_path(self) -> Optional[Path]:
        return None if self.to_stdout else Path(self.output)

    @property
    def json_path(self) -> Optional[Path]:
        markdown_path = self.markdown_path
        if markdown_path is None or not self.json_enabled:
            return None
        return structured_output_path(markdown_path, self.structured_extension, self.markdown_extension)

    def output_paths(self) -> List[Path]:
        """Files this writer will create; empty when the report goes to stdout."""
        return [path for path in (self.markdown_path, self.json_path) if path is not None]

    def write(self, markdown: str, structured: Optional[str] = None) -> List[Path]:
        """Write the artifacts.

        Args:
            markdown: Rendered markdown report.
            structured: Serialized JSON report; ignored when JSON output is disabled.

        Returns:
            The files that were written.

        Raises:
            BrokenPipeError: If stdout is closed while the report is streamed.
            OSError: If a file cannot be written.
        """
        markdown_path = self.markdown_path
        if markdown_path is None:
            stream = self._stream if self._stream is not None else sys.stdout
            stream.write(markdown)
            stream.flush()
            return []

        written = [self._write_file(markdown_path, markdown)]
        json_path = self.json_path
        if json_path is not None and structured is not None:
            written.append(self._write_file(json_path, structured))
        return written

    def _write_file(self, path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        return path
