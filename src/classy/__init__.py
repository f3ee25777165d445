"""classy: find recurring CSS class combinations in HTML documents."""

__version__ = "0.1.0"

from classy.aggregate import accumulate
from classy.exceptions import (
    ClassyError,
    ConfigError,
    DocumentReadError,
    ParseError,
    TraversalError,
)
from classy.pipeline import ScanOptions, build_report, scan_corpus
from classy.report import format_entry, rank, render_report
from classy.scanner import scan_document, scan_file
from classy.schemas import ReportEntry
from classy.signature import normalize_class_value

__all__ = [
    "ClassyError",
    "ConfigError",
    "DocumentReadError",
    "ParseError",
    "ReportEntry",
    "ScanOptions",
    "TraversalError",
    "accumulate",
    "build_report",
    "format_entry",
    "normalize_class_value",
    "rank",
    "render_report",
    "scan_corpus",
    "scan_document",
    "scan_file",
]
