"""Infrastructure layer - report rendering."""

from .formatters import ReportFormatter

__all__ = ["ReportFormatter"]
