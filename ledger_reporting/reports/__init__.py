"""Report rendering."""

from .generator import ReportGenerator

__all__ = ["ReportGenerator"]
