"""Command-line interface for generating exposure-weighted lineups."""

from __future__ import annotations

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from tourneydfs.config import get_rules
from tourneydfs.config_loader import ColumnProfile
from tourneydfs.generator import BuildOutput, build_lineups
from tourneydfs.ingest import PoolLoadError, apply_liked_overrides, load_pool
from tourneydfs.pool import ContestExportError, export_lineups_to_csv
from tourneydfs.report import render_report, sort_by_salary


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tourneydfs",
        description="Generate distinct DFS lineups from salaries and liked-player exposures",
    )
    parser.add_argument("pool", type=Path, help="Path to player pool (CSV or JSON)")
    parser.add_argument(
        "count",
        type=int,
        nargs="?",
        default=1,
        help="Number of lineups to generate (default 1)",
    )
    parser.add_argument("--site", default="FD", help="Site key (e.g., FD, DK)")
    parser.add_argument("--sport", default="NBA5", help="Sport key (e.g., NBA, NBA5, NFL)")
    parser.add_argument(
        "--like",
        action="append",
        default=[],
        help="Liked exposure override as id=weight (fraction 0-1 or percent 0-100)",
    )
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for pool CSV columns (e.g., name=First Name|Last Name)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source")
    parser.add_argument(
        "--max-failures",
        type=int,
        default=None,
        help="Consecutive failed attempts before giving up (default from TOURNEYDFS_MAX_FAILURES)",
    )
    parser.add_argument("--salary-floor", type=int, default=None, help="Override the salary floor")
    parser.add_argument("--salary-cap", type=int, default=None, help="Override the salary cap")
    parser.add_argument("--output", type=Path, default=None, help="Optional lineup CSV path")
    parser.add_argument("--export", type=Path, default=None, help="Optional contest upload CSV path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _write_lineups_csv(path: Path, output: BuildOutput) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["lineup_id", "key", "salary", "player_ids", "player_names", "slots"])
        for lineup in sort_by_salary(output.lineups):
            writer.writerow([
                lineup.lineup_id,
                lineup.key,
                lineup.salary,
                " ".join(lineup.player_ids),
                " | ".join(player.name for player in lineup.players),
                " ".join(lineup.slots),
            ])


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    if args.count < 1:
        parser.error("count must be a positive integer")

    try:
        column_mapping = _parse_mapping(args.column)
        liked_overrides = _parse_mapping(args.like)
        if args.load_profile:
            profile = ColumnProfile.load(args.load_profile)
            column_mapping = profile.pool_mapping | column_mapping
        if args.save_profile:
            ColumnProfile(column_mapping).save(args.save_profile)
            print(f"Saved mapping profile to {args.save_profile}")

        records = load_pool(args.pool, mapping=column_mapping or None)
        records = apply_liked_overrides(records, liked_overrides)
        rules = get_rules(args.site, args.sport)
        output = build_lineups(
            records,
            rules=rules,
            n_lineups=args.count,
            salary_floor=args.salary_floor,
            salary_cap=args.salary_cap,
            max_consecutive_failures=args.max_failures,
            seed=args.seed,
        )
    except (PoolLoadError, KeyError, ValueError, OSError) as exc:
        parser.error(str(exc))

    print(render_report(output))

    if args.output:
        _write_lineups_csv(args.output, output)
        print(f"Wrote {len(output.lineups)} lineups to {args.output}")

    if args.export:
        try:
            payload = export_lineups_to_csv(sort_by_salary(output.lineups), output.rules)
        except ContestExportError as exc:
            print(f"Contest export failed: {exc}", file=sys.stderr)
            return 1
        args.export.write_text(payload, encoding="utf-8")
        print(f"Wrote contest upload to {args.export}")

    if output.exhausted:
        print(f"Lineup generation stopped early: {output.shortfall} lineups short of {output.requested}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
