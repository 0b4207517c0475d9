"""Output strategies rendering a report as markdown or JSON."""

from .base_strategy import OutputStrategy
from .json_strategy import JSONOutputStrategy
from .markdown_strategy import MarkdownOutputStrategy

__all__ = ["JSONOutputStrategy", "MarkdownOutputStrategy", "OutputStrategy"]
