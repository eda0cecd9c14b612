"""Assemble a set of distinct lineups under salary and exposure constraints."""

from __future__ import annotations

import dataclasses
import enum
import logging
import random
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from tourneydfs.config import RosterRules, get_rules, settings
from tourneydfs.models import PlayerRecord

from .builder import LineupBuilder
from .distribution import build_distributions
from .exposure import ExposureRecord, ExposureTracker


logger = logging.getLogger(__name__)


class RejectReason(str, enum.Enum):
    SLOT_FILL = "slot_fill"
    DUPLICATE = "duplicate"
    SALARY_BAND = "salary_band"
    EXPOSURE_CAP = "exposure_cap"


def lineup_key(players: Sequence[PlayerRecord]) -> str:
    """Composition key: player ids joined in slot order."""

    return "-".join(player.player_id for player in players)


def lineup_signature(players: Sequence[PlayerRecord]) -> Tuple[str, ...]:
    """Ids in slot order; unambiguous even when ids contain the key separator."""

    return tuple(player.player_id for player in players)


def lineup_salary(players: Sequence[PlayerRecord]) -> int:
    return sum(player.salary for player in players)


def within_salary_band(salary: float, salary_floor: float, salary_cap: float) -> bool:
    return salary_floor < salary < salary_cap


@dataclass(frozen=True)
class LineupResult:
    lineup_id: str
    players: Tuple[PlayerRecord, ...]
    slots: Tuple[str, ...]

    @property
    def key(self) -> str:
        return lineup_key(self.players)

    @property
    def salary(self) -> int:
        return lineup_salary(self.players)

    @property
    def player_ids(self) -> Tuple[str, ...]:
        return tuple(player.player_id for player in self.players)


@dataclass
class BuildOutput:
    lineups: List[LineupResult]
    exposures: Dict[str, ExposureRecord]
    rules: RosterRules
    requested: int
    attempts: int = 0
    rejections: Counter = field(default_factory=Counter)
    exhausted: bool = False
    elapsed: float = 0.0

    @property
    def shortfall(self) -> int:
        return max(0, self.requested - len(self.lineups))


def _resolve_rules(
    site: str,
    sport: str,
    rules: Optional[RosterRules],
    salary_floor: Optional[float],
    salary_cap: Optional[float],
) -> RosterRules:
    resolved = rules or get_rules(site, sport)
    overrides = {}
    if salary_floor is not None:
        overrides["salary_floor"] = salary_floor
    if salary_cap is not None:
        overrides["salary_cap"] = salary_cap
    if overrides:
        resolved = dataclasses.replace(resolved, **overrides)
    if resolved.salary_floor >= resolved.salary_cap:
        raise ValueError(
            f"salary floor {resolved.salary_floor} must be below salary cap {resolved.salary_cap}"
        )
    return resolved


def build_lineups(
    records: Sequence[PlayerRecord],
    *,
    site: str = "FD",
    sport: str = "NBA5",
    n_lineups: int = 1,
    rules: Optional[RosterRules] = None,
    salary_floor: Optional[float] = None,
    salary_cap: Optional[float] = None,
    max_consecutive_failures: Optional[int] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> BuildOutput:
    """Generate up to ``n_lineups`` distinct lineups from the supplied pool.

    Each attempt builds one candidate and either accepts it or counts a
    consecutive failure. The search stops once the requested count is reached
    or the failure threshold trips; the latter returns whatever was accepted
    with ``exhausted`` set rather than raising.
    """

    if n_lineups < 1:
        raise ValueError(f"n_lineups must be at least 1, got {n_lineups}")
    if max_consecutive_failures is not None and max_consecutive_failures < 1:
        raise ValueError(
            f"max_consecutive_failures must be at least 1, got {max_consecutive_failures}"
        )

    active_rules = _resolve_rules(site, sport, rules, salary_floor, salary_cap)
    threshold = (
        max_consecutive_failures
        if max_consecutive_failures is not None
        else settings.max_consecutive_failures()
    )
    if rng is None:
        rng = random.Random(seed if seed is not None else settings.default_seed())

    pool = list(records)
    distributions = build_distributions(pool, active_rules)
    exposures = ExposureTracker.from_pool(pool, n_lineups)
    builder = LineupBuilder(pool, distributions, active_rules, rng, exposures=exposures)

    accepted: Dict[Tuple[str, ...], Tuple[PlayerRecord, ...]] = {}
    rejections: Counter = Counter()
    consecutive_failures = 0
    attempts = 0

    logger.info(
        "Starting lineup generation – requested=%s, pool=%s, liked=%s, roster=%s, salary band=(%s, %s), failure threshold=%s",
        n_lineups,
        len(pool),
        len(exposures),
        "/".join(active_rules.roster_order),
        active_rules.salary_floor,
        active_rules.salary_cap,
        threshold,
    )
    run_start = time.perf_counter()

    while len(accepted) < n_lineups and consecutive_failures < threshold:
        attempts += 1
        candidate = builder.build_lineup()
        reason = _evaluate(candidate, accepted, active_rules, exposures)
        if candidate is None or reason is not None:
            rejections[reason or RejectReason.SLOT_FILL] += 1
            consecutive_failures += 1
            continue

        key = lineup_key(candidate)
        accepted[lineup_signature(candidate)] = candidate
        exposures.record_acceptance(candidate)
        consecutive_failures = 0
        logger.debug(
            "Accepted lineup %s/%s – %s (salary %s, attempt %s)",
            len(accepted),
            n_lineups,
            key,
            lineup_salary(candidate),
            attempts,
        )

    elapsed = time.perf_counter() - run_start
    exhausted = len(accepted) < n_lineups
    tally = ", ".join(f"{reason.value}={count}" for reason, count in sorted(rejections.items())) or "-"
    if exhausted:
        logger.warning(
            "Lineup generation stopped after %s consecutive failures with %s/%s lineups (attempts %s, rejections %s)",
            consecutive_failures,
            len(accepted),
            n_lineups,
            attempts,
            tally,
        )
    else:
        logger.info(
            "Completed %s lineups in %.2fs (attempts %s, rejections %s)",
            len(accepted),
            elapsed,
            attempts,
            tally,
        )

    lineups = [
        LineupResult(lineup_id=f"L{idx + 1:03}", players=players, slots=active_rules.roster_order)
        for idx, players in enumerate(accepted.values())
    ]
    return BuildOutput(
        lineups=lineups,
        exposures=exposures.snapshot(),
        rules=active_rules,
        requested=n_lineups,
        attempts=attempts,
        rejections=rejections,
        exhausted=exhausted,
        elapsed=elapsed,
    )


def _evaluate(
    candidate: Optional[Tuple[PlayerRecord, ...]],
    accepted: Dict[Tuple[str, ...], Tuple[PlayerRecord, ...]],
    rules: RosterRules,
    exposures: ExposureTracker,
) -> Optional[RejectReason]:
    if candidate is None:
        return RejectReason.SLOT_FILL
    if lineup_signature(candidate) in accepted:
        return RejectReason.DUPLICATE
    if not within_salary_band(lineup_salary(candidate), rules.salary_floor, rules.salary_cap):
        return RejectReason.SALARY_BAND
    if exposures.would_overexpose(candidate):
        return RejectReason.EXPOSURE_CAP
    return None
