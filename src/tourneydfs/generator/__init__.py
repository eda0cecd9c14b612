"""Exposure-weighted random lineup generation."""

from .builder import LineupBuilder
from .distribution import DISTRIBUTION_SIZE, build_distribution, build_distributions
from .exposure import ExposureCapError, ExposureRecord, ExposureTracker
from .service import BuildOutput, LineupResult, RejectReason, build_lineups, lineup_key, lineup_signature

__all__ = [
    "DISTRIBUTION_SIZE",
    "BuildOutput",
    "ExposureCapError",
    "ExposureRecord",
    "ExposureTracker",
    "LineupBuilder",
    "LineupResult",
    "RejectReason",
    "build_distribution",
    "build_distributions",
    "build_lineups",
    "lineup_key",
    "lineup_signature",
]
