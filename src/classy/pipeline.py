"""End-to-end scan of a source tree into a ranked class-set report."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from classy.aggregate import accumulate
from classy.config import DEFAULT_MIN_COUNT, DEFAULT_MIN_WORDS, MARKUP_EXTENSIONS
from classy.files import iter_markup_files
from classy.report import rank
from classy.scanner import scan_file
from classy.schemas import ReportEntry

logger = logging.getLogger(__name__)


@dataclass
class ScanOptions:
    """Options for a corpus scan.

    Attributes:
        min_words: Minimum number of separator spaces a signature needs.
        min_count: Minimum number of occurrences a signature needs.
        extensions: File suffixes treated as markup.
    """

    min_words: int = DEFAULT_MIN_WORDS
    min_count: int = DEFAULT_MIN_COUNT
    extensions: tuple[str, ...] = MARKUP_EXTENSIONS


def scan_corpus(root: Path, options: ScanOptions | None = None) -> Counter[str]:
    """Scan every markup file under ``root`` and count signatures.

    Files are processed one at a time in walk order. The first traversal,
    read or parse error propagates and the partial counts are discarded.
    """
    options = options or ScanOptions()
    counts: Counter[str] = Counter()
    files_scanned = 0
    for path in iter_markup_files(root, options.extensions):
        accumulate(scan_file(path), counts)
        files_scanned += 1
    logger.info(
        "Scanned %d file(s) under %s: %d distinct signature(s)",
        files_scanned,
        root,
        len(counts),
    )
    return counts


def build_report(root: Path, options: ScanOptions | None = None) -> list[ReportEntry]:
    """Scan ``root`` and return the ranked, filtered report entries."""
    options = options or ScanOptions()
    counts = scan_corpus(root, options)
    return rank(counts, min_words=options.min_words, min_count=options.min_count)
