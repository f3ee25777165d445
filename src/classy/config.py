"""Local configuration for classy."""

from __future__ import annotations

import os
from typing import Mapping

from classy.exceptions import ConfigError

APP_NAME = "classy"
ENV_PREFIX = "CLASSY"

DEFAULT_MIN_WORDS = 1
DEFAULT_MIN_COUNT = 3

# Only files with one of these suffixes are scanned (case-sensitive).
MARKUP_EXTENSIONS = (".html", ".htm")

CLASSY_NAMES_ENV = f"{ENV_PREFIX}_NAMES"
CLASSY_THRESHOLD_ENV = f"{ENV_PREFIX}_THRESHOLD"


def read_env_int(
    name: str, default: int, environ: Mapping[str, str] | None = None
) -> int:
    """Read an integer override from the environment.

    Args:
        name: Environment variable name (e.g. ``CLASSY_NAMES``).
        default: Value used when the variable is unset.
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The parsed integer, or ``default`` when the variable is unset.

    Raises:
        ConfigError: If the variable is set but is not an integer.
    """
    env = os.environ if environ is None else environ
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"invalid value {raw!r} for {name}: not an integer") from exc
