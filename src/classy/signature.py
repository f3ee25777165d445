"""Canonical class-set signatures for ``class`` attribute values."""

from __future__ import annotations

import re

_OPEN = "{{"
_CLOSE = "}}"
# Unicode whitespace except the \x1c-\x1f information separators.
_WHITESPACE_RE = re.compile(r"[^\S\x1c-\x1f]+")


def strip_placeholders(raw: str) -> str:
    """Replace every ``{{ ... }}`` template span with a single space.

    An unterminated ``{{`` swallows the rest of the string.
    """
    text = raw
    while True:
        start = text.find(_OPEN)
        if start == -1:
            return text
        end = text.find(_CLOSE, start + len(_OPEN))
        suffix = "" if end == -1 else text[end + len(_CLOSE) :]
        text = text[:start] + " " + suffix


def normalize_class_value(raw: str) -> str:
    """Turn a raw ``class`` attribute value into its signature.

    Template placeholders are dropped, the remainder is split on whitespace,
    and the unique tokens are joined in sorted order with single spaces.

    Examples:
        >>> normalize_class_value("b a  a")
        'a b'
        >>> normalize_class_value("{{ if x }}btn{{ end }} btn-lg")
        'btn btn-lg'
    """
    text = strip_placeholders(raw)
    tokens = sorted({token for token in _WHITESPACE_RE.split(text) if token})
    return " ".join(tokens)
