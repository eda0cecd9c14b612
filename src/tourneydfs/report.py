"""Console formatting for generated lineups and exposure fulfilment."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Sequence

from tourneydfs.generator import BuildOutput, ExposureRecord, LineupResult


def format_currency(amount: float) -> str:
    """Format a salary as US dollars, e.g. ``$58,000.00``."""

    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def lineup_summary(lineup: LineupResult) -> str:
    return f"{lineup.key} ({format_currency(lineup.salary)})"


def sort_by_salary(lineups: Iterable[LineupResult]) -> List[LineupResult]:
    return sorted(lineups, key=lambda lineup: lineup.salary, reverse=True)


def format_lineups(lineups: Sequence[LineupResult]) -> List[str]:
    return [lineup_summary(lineup) for lineup in sort_by_salary(lineups)]


def format_metadata(
    salary_floor: float,
    salary_cap: float,
    generated: int,
    requested: int,
    elapsed: float,
) -> List[str]:
    lines = [
        f"salaryFloor = {format_currency(salary_floor)}",
        f"salaryCap = {format_currency(salary_cap)}",
        f"Generated {generated} lineups in {elapsed:.3f}s",
    ]
    if generated < requested:
        lines.append(f"Requested {requested} lineups; stopped {requested - generated} short")
    return lines


def format_exposure_table(exposures: Mapping[str, ExposureRecord], generated: int) -> List[str]:
    """Per liked player: appearances, cap, target share and achieved share."""

    if not exposures:
        return []
    width = max(len("player"), *(len(pid) for pid in exposures))
    lines = [f"{'player':<{width}}  count  max  target  actual"]
    for pid, record in sorted(exposures.items(), key=lambda item: (-item[1].liked, item[0])):
        actual = record.count / generated if generated else 0.0
        lines.append(
            f"{pid:<{width}}  {record.count:>5}  {record.max:>3}  {record.liked:>6.0%}  {actual:>6.0%}"
        )
    return lines


def render_report(output: BuildOutput) -> str:
    lines: List[str] = []
    lines.extend(format_lineups(output.lineups))
    lines.extend(
        format_metadata(
            output.rules.salary_floor,
            output.rules.salary_cap,
            len(output.lineups),
            output.requested,
            output.elapsed,
        )
    )
    table = format_exposure_table(output.exposures, len(output.lineups))
    if table:
        lines.append("")
        lines.extend(table)
    return "\n".join(lines)
