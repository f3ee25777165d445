"""Parse markup documents and collect class signatures per element."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from classy.exceptions import DocumentReadError, ParseError
from classy.signature import normalize_class_value

try:
    from bs4 import BeautifulSoup
    from bs4.builder import ParserRejectedMarkup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

_CLASS_ATTR = "class"


def parse_markup(markup: bytes | str) -> BeautifulSoup:
    """Parse an HTML document, keeping ``class`` values as raw strings.

    Raises:
        ParseError: If the parser rejects the document.
    """
    try:
        # Without multi_valued_attributes=None bs4 would split class into a list.
        return BeautifulSoup(markup, "lxml", multi_valued_attributes=None)
    except ParserRejectedMarkup as exc:
        raise ParseError(str(exc)) from exc


def iter_class_values(root: Tag) -> Iterator[str]:
    """Yield the raw ``class`` value of every element under ``root``.

    Elements are visited in document order; ``root`` itself is included when
    it is an element. Text, comments and other non-element nodes are skipped.
    """
    if root.name != BeautifulSoup.ROOT_TAG_NAME:
        value = _class_value(root)
        if value is not None:
            yield value
    for element in root.find_all(True):
        value = _class_value(element)
        if value is not None:
            yield value


def _class_value(element: Tag) -> str | None:
    value = element.attrs.get(_CLASS_ATTR)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # Trees built with the default settings store class as a list of tokens.
    return " ".join(value)


def scan_document(root: Tag) -> list[str]:
    """Return the signature of every element under ``root`` with a class."""
    return [normalize_class_value(value) for value in iter_class_values(root)]


def scan_file(path: Path) -> list[str]:
    """Read, parse and scan one markup file.

    Args:
        path: File to scan.

    Returns:
        One signature per element carrying a ``class`` attribute.

    Raises:
        DocumentReadError: If the file cannot be read.
        ParseError: If the file content cannot be parsed.
    """
    try:
        markup = path.read_bytes()
    except OSError as exc:
        raise DocumentReadError(f"cannot read {path}: {exc}") from exc

    try:
        soup = parse_markup(markup)
    except ParseError as exc:
        raise ParseError(f"cannot parse {path}: {exc}") from exc

    signatures = scan_document(soup)
    logger.debug("Scanned %s: %d classed elements", path, len(signatures))
    return signatures
