"""Exposure targets and running counts for liked players."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Sequence, Union

from tourneydfs.models import PlayerRecord

from .distribution import liked_share


class ExposureCapError(RuntimeError):
    """Raised when recording a lineup would push a player past its exposure cap."""


@dataclass
class ExposureRecord:
    player_id: str
    liked: float
    max: int
    count: int = 0

    @property
    def remaining(self) -> int:
        return self.max - self.count

    @property
    def fulfilled(self) -> float:
        """Share of the target count reached so far."""
        if self.max <= 0:
            return 1.0
        return self.count / self.max


PlayerRef = Union[PlayerRecord, str]


def _player_id(player: PlayerRef) -> str:
    return player if isinstance(player, str) else player.player_id


class ExposureTracker:
    """Tracks how often each liked player has appeared in accepted lineups.

    Counts only move forward, by at most one per accepted lineup, and never
    past ``ceil(liked * requested_count)``.
    """

    def __init__(self, records: Mapping[str, ExposureRecord]):
        self._records: Dict[str, ExposureRecord] = dict(records)

    @classmethod
    def from_pool(cls, records: Iterable[PlayerRecord], requested_count: int) -> "ExposureTracker":
        exposures: Dict[str, ExposureRecord] = {}
        for record in records:
            if record.liked is None:
                continue
            exposures[record.player_id] = ExposureRecord(
                player_id=record.player_id,
                liked=record.liked,
                max=liked_share(record.liked, requested_count),
            )
        return cls(exposures)

    @property
    def records(self) -> Mapping[str, ExposureRecord]:
        return MappingProxyType(self._records)

    def __contains__(self, player: object) -> bool:
        if isinstance(player, (PlayerRecord, str)):
            return _player_id(player) in self._records
        return False

    def __len__(self) -> int:
        return len(self._records)

    def is_satisfiable(self, player: PlayerRef) -> bool:
        """True if one more appearance keeps the player within its cap."""

        exposure = self._records.get(_player_id(player))
        if exposure is None:
            return True
        return exposure.count + 1 <= exposure.max

    def would_overexpose(self, players: Iterable[PlayerRef]) -> bool:
        return not all(self.is_satisfiable(player) for player in players)

    def record_acceptance(self, players: Sequence[PlayerRef]) -> None:
        liked = [self._records[pid] for pid in map(_player_id, players) if pid in self._records]
        for exposure in liked:
            if exposure.count + 1 > exposure.max:
                raise ExposureCapError(
                    f"Player {exposure.player_id} already at exposure cap {exposure.max}"
                )
        for exposure in liked:
            exposure.count += 1

    def snapshot(self) -> Dict[str, ExposureRecord]:
        """Return copies of the current records keyed by player id."""

        return {
            pid: ExposureRecord(
                player_id=record.player_id,
                liked=record.liked,
                max=record.max,
                count=record.count,
            )
            for pid, record in self._records.items()
        }
