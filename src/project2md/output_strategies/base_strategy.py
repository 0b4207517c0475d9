"""Output strategy base class defining the interface for report rendering.

This module provides the abstract base class that defines how a finished report is
turned into text. Each concrete strategy renders the same report information in one
format, so the two artifacts of a run always describe the same data.
"""

from abc import ABC, abstractmethod

from project2md.report.models import Report


class OutputStrategy(ABC):
    """Abstract base class defining the interface for report output formats.

    This class implements the Strategy pattern for rendering reports in different
    formats (markdown for people, JSON for machines). Strategies are pure: they never
    touch the filesystem and always produce the same text for the same report.

    Example:
        >>> class PlainStrategy(OutputStrategy):
        ...     def render(self, report: Report) -> str:
        ...         return "\\n".join(e.relative_path for e in report.entries)
        ...
        ...     def get_file_extension(self) -> str:
        ...         return ".txt"
    """

    @abstractmethod
    def render(self, report: Report) -> str:
        """Render a complete report.

        Args:
            report: The report to render.

        Returns:
            The full text of the artifact.
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get the appropriate file extension for this output format.

        Returns:
            The file extension including the leading dot (e.g., ".md", ".json").
        """
        pass
