"""Environment-driven tunables for the lineup generator."""

from __future__ import annotations

import logging
import os
from typing import Optional


logger = logging.getLogger(__name__)

MAX_FAILURES_ENV = "TOURNEYDFS_MAX_FAILURES"
SEED_ENV = "TOURNEYDFS_SEED"

MAX_FAILURES_DEFAULT = 10_000


def _env_int(name: str, default: Optional[int], *, min_value: int | None = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %s", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def max_consecutive_failures() -> int:
    """Consecutive rejected attempts tolerated before the search gives up."""

    return _env_int(MAX_FAILURES_ENV, MAX_FAILURES_DEFAULT, min_value=1) or MAX_FAILURES_DEFAULT


def default_seed() -> Optional[int]:
    return _env_int(SEED_ENV, None)
