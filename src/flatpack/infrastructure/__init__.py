"""Infrastructure layer - geometry backend and output formatting."""

from .formatters import LayoutJsonFormatter, LayoutReportFormatter

__all__ = ["LayoutJsonFormatter", "LayoutReportFormatter"]
