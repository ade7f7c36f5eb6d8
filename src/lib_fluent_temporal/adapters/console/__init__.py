"""Console adapters."""

from __future__ import annotations

from .rich_report import RichReportAdapter

__all__ = ["RichReportAdapter"]
