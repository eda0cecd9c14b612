"""Contest CSV export helpers for generated lineups."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Mapping, Sequence

from tourneydfs.config import RosterRules
from tourneydfs.generator import LineupResult


class ContestExportError(RuntimeError):
    """Raised when a lineup cannot be exported for a contest template."""


_DEFAULT_HEADER_ALIASES: Mapping[str, str] = {
    "DEF": "DST",
}


def slot_headers(slot_order: Sequence[str]) -> tuple[str, ...]:
    counts: dict[str, int] = {}
    headers: list[str] = []
    for slot in slot_order:
        key = _DEFAULT_HEADER_ALIASES.get(slot, slot)
        counts[key] = counts.get(key, 0) + 1
        if list(slot_order).count(slot) > 1 and key not in {"FLEX", "UTIL"}:
            headers.append(f"{key}{counts[key]}")
        else:
            headers.append(key)
    return tuple(headers)


def _check_lineup(lineup: LineupResult, rules: RosterRules) -> None:
    if tuple(lineup.slots) != tuple(rules.roster_order):
        raise ContestExportError(
            f"Lineup {lineup.lineup_id} was built for slots {'/'.join(lineup.slots)}, "
            f"not {rules.key}"
        )
    if len(lineup.players) != len(rules.roster_order):
        raise ContestExportError(
            f"Lineup {lineup.lineup_id} has {len(lineup.players)} players for "
            f"{len(rules.roster_order)} slots"
        )
    for slot, player in zip(rules.roster_order, lineup.players):
        if not rules.is_eligible(player.positions, slot):
            raise ContestExportError(
                f"Lineup {lineup.lineup_id} places {player.player_id} in ineligible slot {slot}"
            )


def export_lineups_to_csv(
    lineups: Sequence[LineupResult],
    rules: RosterRules,
    *,
    entry_names: Sequence[str] | None = None,
) -> str:
    """Convert lineups to a contest upload CSV with one column per roster slot."""

    if entry_names is not None and len(entry_names) != len(lineups):
        raise ContestExportError("entry_names length must match lineups length")

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(("EntryName", *slot_headers(rules.roster_order)))

    for idx, lineup in enumerate(lineups):
        _check_lineup(lineup, rules)
        entry_name = entry_names[idx] if entry_names is not None else lineup.lineup_id
        writer.writerow([entry_name, *lineup.player_ids])

    return buffer.getvalue()


__all__ = [
    "ContestExportError",
    "export_lineups_to_csv",
    "slot_headers",
]
