"""Accumulate signature counts across the corpus."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def accumulate(
    signatures: Iterable[str], counts: Counter[str] | None = None
) -> Counter[str]:
    """Add one occurrence per signature to ``counts``.

    When ``counts`` is given it is updated in place and returned; otherwise a
    new counter is created.
    """
    if counts is None:
        counts = Counter()
    for signature in signatures:
        counts[signature] += 1
    return counts
