"""Input adapters that normalize raw player pools."""

from .pool import (
    DEFAULT_POOL_MAPPING,
    FANDUEL_POOL_MAPPING,
    PoolLoadError,
    PoolRow,
    apply_liked_overrides,
    load_pool,
    load_pool_csv,
    load_pool_json,
    parse_liked,
    rows_to_records,
)

__all__ = [
    "DEFAULT_POOL_MAPPING",
    "FANDUEL_POOL_MAPPING",
    "PoolLoadError",
    "PoolRow",
    "apply_liked_overrides",
    "load_pool",
    "load_pool_csv",
    "load_pool_json",
    "parse_liked",
    "rows_to_records",
]
