"""Weighted per-slot selection distributions built from liked players."""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Optional, Sequence, Tuple

from tourneydfs.config import RosterRules
from tourneydfs.models import PlayerRecord


logger = logging.getLogger(__name__)

DISTRIBUTION_SIZE = 100

Distribution = Tuple[Optional[str], ...]


def liked_share(liked: float, scale: int) -> int:
    """Return ``ceil(liked * scale)`` without float noise pushing it up a unit."""

    return math.ceil(round(liked * scale, 6))


def _eligible(record: PlayerRecord, slot: str, rules: RosterRules | None) -> bool:
    if rules is None:
        return slot in record.positions
    return rules.is_eligible(record.positions, slot)


def build_distribution(
    records: Sequence[PlayerRecord],
    slot: str,
    rules: RosterRules | None = None,
) -> Distribution:
    """Build the weighted pick list for one slot.

    Each liked player eligible for ``slot`` contributes ``ceil(liked * 100)``
    copies of its id. ``None`` entries pad the list to 100 and stand for an
    unbiased pick among non-liked players. Liked weights summing past 1.0 are
    not normalized; the list simply grows beyond 100 entries.
    """

    picks: list[Optional[str]] = []
    total_weight = 0.0
    for record in records:
        if record.liked is None or not _eligible(record, slot, rules):
            continue
        total_weight += record.liked
        picks.extend([record.player_id] * liked_share(record.liked, DISTRIBUTION_SIZE))

    padding = DISTRIBUTION_SIZE - len(picks)
    if padding > 0:
        picks.extend([None] * padding)
    elif len(picks) > DISTRIBUTION_SIZE:
        logger.warning(
            "Liked weights for slot %s sum to %.2f; unbiased picks are disabled for this slot",
            slot,
            total_weight,
        )
    return tuple(picks)


def build_distributions(
    records: Sequence[PlayerRecord],
    rules: RosterRules | Iterable[str],
) -> Dict[str, Distribution]:
    """Return one distribution per distinct slot code."""

    if isinstance(rules, RosterRules):
        slots: Iterable[str] = rules.distinct_slots()
        slot_rules: RosterRules | None = rules
    else:
        slots = dict.fromkeys(rules)
        slot_rules = None
    return {slot: build_distribution(records, slot, slot_rules) for slot in slots}
