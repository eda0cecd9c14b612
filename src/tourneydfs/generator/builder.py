"""Randomized, salary-constrained construction of a single lineup."""

from __future__ import annotations

import random
from typing import Collection, Dict, List, Mapping, Optional, Sequence, Tuple

from tourneydfs.config import RosterRules
from tourneydfs.models import PlayerRecord

from .distribution import Distribution
from .exposure import ExposureTracker


class LineupBuilder:
    """Fills roster slots one at a time from a fixed player pool.

    A slot draw first picks from the slot's liked distribution. A liked id
    restricts the choice to that player and fails if the player cannot be
    placed; an unbiased pick chooses uniformly among non-liked candidates.
    Liked players are never reachable through the unbiased branch.
    """

    def __init__(
        self,
        records: Sequence[PlayerRecord],
        distributions: Mapping[str, Distribution],
        rules: RosterRules,
        rng: random.Random,
        exposures: Optional[ExposureTracker] = None,
    ):
        self.records = tuple(records)
        self.distributions = distributions
        self.rules = rules
        self.rng = rng
        self.exposures = exposures
        self._slot_pools: Dict[str, Tuple[PlayerRecord, ...]] = {
            slot: tuple(r for r in self.records if rules.is_eligible(r.positions, slot))
            for slot in rules.distinct_slots()
        }

    def slot_pool(self, slot: str) -> Tuple[PlayerRecord, ...]:
        pool = self._slot_pools.get(slot)
        if pool is None:
            pool = tuple(r for r in self.records if self.rules.is_eligible(r.positions, slot))
            self._slot_pools[slot] = pool
        return pool

    def eligible_candidates(
        self,
        slot: str,
        remaining_salary: float,
        used_ids: Collection[str] = (),
    ) -> List[PlayerRecord]:
        candidates = []
        for record in self.slot_pool(slot):
            if record.salary >= remaining_salary or record.player_id in used_ids:
                continue
            if self.exposures is not None and not self.exposures.is_satisfiable(record):
                continue
            candidates.append(record)
        return candidates

    def fill_slot(
        self,
        slot: str,
        remaining_salary: float,
        used_ids: Collection[str] = (),
    ) -> Optional[PlayerRecord]:
        """Pick a player for ``slot`` or return ``None`` when no valid fill exists."""

        candidates = self.eligible_candidates(slot, remaining_salary, used_ids)
        if not candidates:
            return None

        distribution = self.distributions.get(slot)
        selected_id = self.rng.choice(distribution) if distribution else None

        if selected_id is not None:
            for record in candidates:
                if record.player_id == selected_id:
                    return record
            return None

        unliked = [record for record in candidates if record.liked is None]
        if not unliked:
            return None
        return self.rng.choice(unliked)

    def build_lineup(self) -> Optional[Tuple[PlayerRecord, ...]]:
        """Fill every slot in roster order; ``None`` if any slot cannot be filled."""

        placed: List[PlayerRecord] = []
        used_ids: set[str] = set()
        spent = 0
        for slot in self.rules.roster_order:
            selection = self.fill_slot(slot, self.rules.salary_cap - spent, used_ids)
            if selection is None:
                return None
            placed.append(selection)
            used_ids.add(selection.player_id)
            spent += selection.salary
        return tuple(placed)
