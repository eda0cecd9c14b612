"""Configuration helpers for roster rules and generator tunables."""

from .roster import RosterRules, get_rules, get_rules_by_key, iter_rules
from .settings import default_seed, max_consecutive_failures

__all__ = [
    "RosterRules",
    "default_seed",
    "get_rules",
    "get_rules_by_key",
    "iter_rules",
    "max_consecutive_failures",
]
