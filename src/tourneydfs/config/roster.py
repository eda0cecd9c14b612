"""Roster configuration for supported site/sport combinations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple, Union


@dataclass(frozen=True)
class RosterRules:
    site: str
    sport: str
    salary_cap: float
    salary_floor: float
    roster_order: Tuple[str, ...]
    slot_positions: Mapping[str, FrozenSet[str]] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return f"{self.site}_{self.sport}"

    def distinct_slots(self) -> Tuple[str, ...]:
        """Slot codes in roster order with repeats removed."""

        return tuple(dict.fromkeys(self.roster_order))

    def eligible_positions(self, slot: str) -> FrozenSet[str]:
        """Player position codes that may fill ``slot``."""

        return self.slot_positions.get(slot, frozenset({slot}))

    def is_eligible(self, positions: Iterable[str], slot: str) -> bool:
        allowed = self.eligible_positions(slot)
        return any(pos in allowed for pos in positions)


_ROSTER_RULES: Dict[Tuple[str, str], RosterRules] = {
    ("FD", "NBA"): RosterRules(
        site="FD",
        sport="NBA",
        salary_cap=60_000,
        salary_floor=57_000,
        roster_order=("PG", "PG", "SG", "SG", "SF", "SF", "PF", "PF", "C"),
    ),
    ("FD", "NBA5"): RosterRules(
        site="FD",
        sport="NBA5",
        # FanDuel NBA cap scaled to five of nine slots, floor at 75% of that
        salary_cap=60_000 * 5 / 9,
        salary_floor=0.75 * 60_000 * 5 / 9,
        roster_order=("PG", "SG", "SF", "PF", "C"),
    ),
    ("FD", "NFL"): RosterRules(
        site="FD",
        sport="NFL",
        salary_cap=60_000,
        salary_floor=57_000,
        roster_order=("QB", "RB", "RB", "WR", "WR", "WR", "TE", "FLEX", "DEF"),
        slot_positions={
            "FLEX": frozenset({"RB", "WR", "TE"}),
            "DEF": frozenset({"D"}),
        },
    ),
    ("FD", "MLB"): RosterRules(
        site="FD",
        sport="MLB",
        salary_cap=35_000,
        salary_floor=33_000,
        roster_order=("P", "C1B", "2B", "3B", "SS", "OF", "OF", "OF", "UTIL"),
        slot_positions={
            "C1B": frozenset({"C", "1B"}),
            "UTIL": frozenset({"C", "1B", "2B", "3B", "SS", "OF"}),
        },
    ),
    ("DK", "NBA"): RosterRules(
        site="DK",
        sport="NBA",
        salary_cap=50_000,
        salary_floor=47_000,
        roster_order=("PG", "SG", "SF", "PF", "C", "G", "F", "UTIL"),
        slot_positions={
            "G": frozenset({"PG", "SG"}),
            "F": frozenset({"SF", "PF"}),
            "UTIL": frozenset({"PG", "SG", "SF", "PF", "C"}),
        },
    ),
}


def iter_rules() -> Iterable[RosterRules]:
    """Return an iterator of all configured rule sets."""

    return _ROSTER_RULES.values()


def get_rules(site: str, sport: str) -> RosterRules:
    """Fetch rules for a site/sport pair, raising KeyError if missing."""

    key = (site.upper(), sport.upper())
    if key not in _ROSTER_RULES:
        raise KeyError(f"No roster rules configured for site={site!r}, sport={sport!r}")
    return _ROSTER_RULES[key]


def get_rules_by_key(site_key: Union[str, Tuple[str, str]]) -> RosterRules:
    """Resolve rules using either "SITE_SPORT" or (site, sport)."""

    if isinstance(site_key, tuple):
        site, sport = site_key
        return get_rules(site, sport)

    if not isinstance(site_key, str):
        raise TypeError("site_key must be a str or (site, sport) tuple")

    parts = site_key.split("_", 1)
    if len(parts) != 2:
        raise ValueError(f"site_key must look like 'SITE_SPORT', got {site_key!r}")

    site, sport = parts
    return get_rules(site, sport)


SITE_CONFIG: Mapping[str, RosterRules] = {
    rules.key: rules for rules in _ROSTER_RULES.values()
}
