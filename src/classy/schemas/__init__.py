"""Shared schemas for classy."""

from classy.schemas.report import ReportEntry

__all__ = ["ReportEntry"]
