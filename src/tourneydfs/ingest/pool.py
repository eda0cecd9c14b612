"""Helpers to load player pools from CSV or JSON and emit canonical records."""

from __future__ import annotations

import csv
import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ValidationError

from tourneydfs.models import PlayerRecord


logger = logging.getLogger(__name__)


class PoolLoadError(ValueError):
    """Raised when a player pool cannot be turned into valid records."""


class PoolRow(BaseModel):
    raw_id: Optional[str] = None
    raw_name: str
    raw_team: str = ""
    raw_position: Optional[str] = None
    raw_salary: str
    raw_liked: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any], mapping: Mapping[str, str]) -> "PoolRow":
        def extract(spec: Optional[str | Sequence[str]], *, default: Optional[str] = None) -> Optional[str]:
            if spec is None:
                return default
            if isinstance(spec, str):
                value = row.get(spec)
                return str(value).strip() if value is not None else default
            parts = [str(row.get(col, "")).strip() for col in spec if row.get(col)]
            return " ".join(parts) if parts else default

        def parse_spec(key: str, default_key: Optional[str] = None) -> Optional[str | Sequence[str]]:
            spec = mapping.get(key)
            if spec is None and default_key:
                spec = default_key
            if spec is None:
                return None
            if isinstance(spec, str) and "|" in spec:
                return tuple(part.strip() for part in spec.split("|"))
            return spec

        data = {
            "raw_id": extract(parse_spec("player_id")),
            "raw_name": extract(parse_spec("name", "name"), default=""),
            "raw_team": extract(parse_spec("team", "team"), default=""),
            "raw_position": extract(parse_spec("position")),
            "raw_salary": extract(parse_spec("salary", "salary"), default="0"),
            "raw_liked": extract(parse_spec("liked")),
        }
        return cls(**data)


DEFAULT_POOL_MAPPING = {
    "player_id": "id",
    "name": "name",
    "team": "team",
    "position": "pos",
    "salary": "salary",
    "liked": "liked",
}

FANDUEL_POOL_MAPPING = {
    "player_id": "Id",
    "name": "First Name|Last Name",
    "team": "Team",
    "position": "Position",
    "salary": "Salary",
    "liked": "Liked",
}


def _parse_salary(raw_salary: str) -> int:
    digits = re.sub(r"[^0-9]", "", raw_salary.split(".", 1)[0])
    if not digits:
        raise ValueError(f"salary '{raw_salary}' has no digits")
    return int(digits)


def _parse_positions(raw_position: Optional[str]) -> List[str]:
    if not raw_position:
        return []
    return [token.strip().upper() for token in re.split(r"[/,]", raw_position) if token.strip()]


def parse_liked(raw_liked: Any) -> Optional[float]:
    """Parse a liked weight given as a fraction (0.3), percent (30) or "30%"."""

    if raw_liked is None:
        return None
    text = str(raw_liked).strip()
    if not text:
        return None
    percent = text.endswith("%")
    try:
        value = float(text.rstrip("%").strip())
    except ValueError:
        raise ValueError(f"liked weight '{raw_liked}' is not numeric") from None
    if percent or value > 1.0:
        value /= 100.0
    if value == 0:
        return None
    if not 0.0 < value <= 1.0:
        raise ValueError(f"liked weight '{raw_liked}' must fall within (0, 1]")
    return value


def rows_to_records(rows: Iterable[PoolRow]) -> List[PlayerRecord]:
    records: List[PlayerRecord] = []
    seen: set[str] = set()
    for line, row in enumerate(rows, start=1):
        player_id = row.raw_id or row.raw_name
        if player_id in seen:
            raise PoolLoadError(f"Duplicate player id {player_id!r} in pool (row {line})")
        seen.add(player_id)
        metadata: dict[str, object] = {}
        if row.raw_position is not None:
            metadata["raw_position"] = row.raw_position
        try:
            records.append(
                PlayerRecord(
                    player_id=player_id,
                    name=row.raw_name,
                    team=row.raw_team.upper(),
                    positions=_parse_positions(row.raw_position),
                    salary=_parse_salary(row.raw_salary),
                    liked=parse_liked(row.raw_liked),
                    metadata=metadata,
                )
            )
        except (ValidationError, ValueError) as exc:
            raise PoolLoadError(f"Invalid pool row {line} ({player_id!r}): {exc}") from exc
    return records


def _resolve_mapping(mapping: Mapping[str, str] | None) -> dict[str, str]:
    """Overlay a partial column mapping on the default pool columns."""

    return {**DEFAULT_POOL_MAPPING, **(mapping or {})}


def load_pool_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRecord]:
    mapping = _resolve_mapping(mapping)
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = [PoolRow.from_mapping(row, mapping) for row in reader]
    return rows_to_records(rows)


def _json_row(entry: Mapping[str, Any]) -> dict[str, Any]:
    row = dict(entry)
    positions = row.get("pos")
    if isinstance(positions, (list, tuple)):
        row["pos"] = "/".join(str(pos) for pos in positions)
    if row.get("liked") is False:
        row.pop("liked")
    return row


def load_pool_json(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRecord]:
    mapping = _resolve_mapping(mapping)
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, Mapping):
        payload = payload.get("players", [])
    if not isinstance(payload, list):
        raise PoolLoadError(f"{path} must contain a list of players")
    rows = [PoolRow.from_mapping(_json_row(entry), mapping) for entry in payload]
    return rows_to_records(rows)


def load_pool(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRecord]:
    """Load a pool, choosing the reader from the file suffix."""

    suffix = path.suffix.lower()
    if suffix == ".csv":
        records = load_pool_csv(path, mapping=mapping)
    elif suffix == ".json":
        records = load_pool_json(path, mapping=mapping)
    else:
        raise PoolLoadError(f"Unsupported pool file type {suffix or '<none>'!r} for {path}")
    liked = sum(1 for record in records if record.is_liked)
    logger.info("Loaded %s players (%s liked) from %s", len(records), liked, path)
    return records


def apply_liked_overrides(
    records: Sequence[PlayerRecord],
    overrides: Mapping[str, float | str],
) -> List[PlayerRecord]:
    """Return records with liked weights replaced; a weight of 0 clears it."""

    if not overrides:
        return list(records)

    known = {record.player_id for record in records}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise PoolLoadError(f"Liked overrides reference unknown players: {', '.join(unknown)}")

    updated: List[PlayerRecord] = []
    for record in records:
        if record.player_id not in overrides:
            updated.append(record)
            continue
        liked = parse_liked(overrides[record.player_id])
        updated.append(record.model_copy(update={"liked": liked}))
    return updated
