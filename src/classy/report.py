"""Rank corpus signatures and render the frequency report."""

from __future__ import annotations

from typing import Iterable, Mapping

from classy.schemas import ReportEntry

_SHORT_ESCAPES = {
    "\a": r"\a",
    "\b": r"\b",
    "\f": r"\f",
    "\n": r"\n",
    "\r": r"\r",
    "\t": r"\t",
    "\v": r"\v",
    "\\": r"\\",
    '"': r"\"",
}


def rank(
    counts: Mapping[str, int],
    *,
    min_words: int,
    min_count: int,
) -> list[ReportEntry]:
    """Order signatures by ascending count and apply the report thresholds.

    Ties on count are broken by the signature text, so the order is total.
    A signature's word count is its number of separator spaces: ``"a"`` has
    zero and is dropped when ``min_words`` is 1.

    Args:
        counts: Occurrences keyed by signature. Not modified.
        min_words: Minimum number of separator spaces.
        min_count: Minimum number of occurrences.

    Returns:
        Fresh list of surviving entries in report order.
    """
    ordered = sorted(counts, key=lambda signature: (counts[signature], signature))
    entries: list[ReportEntry] = []
    for signature in ordered:
        count = counts[signature]
        # Zero entries left behind in a Counter are not occurrences.
        if count < 1 or count < min_count:
            continue
        entry = ReportEntry(signature=signature, count=count)
        if entry.separator_count < min_words:
            continue
        entries.append(entry)
    return entries


def quote_go_string(text: str) -> str:
    """Quote ``text`` the way Go's ``%q`` verb renders a string."""
    parts = ['"']
    for char in text:
        escaped = _SHORT_ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif char.isprintable():
            parts.append(char)
        else:
            parts.append(_escape_codepoint(ord(char)))
    parts.append('"')
    return "".join(parts)


def _escape_codepoint(codepoint: int) -> str:
    if codepoint < 0x20 or codepoint == 0x7F:
        return f"\\x{codepoint:02x}"
    if codepoint < 0x10000:
        return f"\\u{codepoint:04x}"
    return f"\\U{codepoint:08x}"


def format_entry(entry: ReportEntry) -> str:
    """Format one report line: width-2 count, a tab, the quoted signature."""
    return f"{entry.count:2d}\t{quote_go_string(entry.signature)}"


def render_report(entries: Iterable[ReportEntry]) -> str:
    """Render entries as newline-terminated report lines."""
    return "".join(f"{format_entry(entry)}\n" for entry in entries)
