"""Canonical player model shared across ingestion and generator layers."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class PlayerRecord(BaseModel):
    """Normalized player payload used by the lineup generator.

    ``liked`` is the fraction of generated lineups the player should appear in.
    ``None`` means the player carries no exposure target and is only reachable
    through uniform selection.
    """

    player_id: str = Field(..., min_length=1)
    name: str = ""
    team: str = ""
    positions: List[str] = Field(..., min_length=1)
    salary: int = Field(..., gt=0)
    liked: Optional[float] = Field(default=None, gt=0.0, le=1.0)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator("positions")
    @classmethod
    def _normalize_positions(cls, value: List[str]) -> List[str]:
        positions = [pos.strip().upper() for pos in value if pos and pos.strip()]
        if not positions:
            raise ValueError("positions must contain at least one position code")
        return positions

    @property
    def is_liked(self) -> bool:
        return self.liked is not None
