"""Discover markup files under a source directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from classy.config import MARKUP_EXTENSIONS
from classy.exceptions import TraversalError


def is_hidden(name: str) -> bool:
    """Return True for dot-prefixed names such as ``.git`` or ``.cache``."""
    return name.startswith(".")


def iter_markup_files(
    root: Path, extensions: Iterable[str] = MARKUP_EXTENSIONS
) -> Iterator[Path]:
    """Yield markup files under ``root`` in lexical walk order.

    Hidden directories below ``root`` are pruned, so nothing inside them is
    visited. ``root`` itself is always walked. Directory symlinks are not
    followed.

    Args:
        root: Directory to walk. A file is yielded as-is when its suffix
            matches.
        extensions: Allowed file suffixes, compared case-sensitively.

    Raises:
        TraversalError: If ``root`` does not exist or a directory cannot be
            listed.
    """
    allowed = frozenset(extensions)
    if root.is_file():
        if root.suffix in allowed:
            yield root
        return
    if not root.is_dir():
        raise TraversalError(f"source directory not found: {root}")

    def _raise(exc: OSError) -> None:
        raise TraversalError(f"cannot read directory {exc.filename}: {exc.strerror}") from exc

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames[:] = sorted(name for name in dirnames if not is_hidden(name))
        base = Path(dirpath)
        for name in sorted(filenames):
            path = base / name
            if path.suffix in allowed:
                yield path
