"""Tournament lineup generation from salaries and liked-player exposures."""

from tourneydfs.generator import BuildOutput, LineupResult, build_lineups
from tourneydfs.models import PlayerRecord

__version__ = "0.1.0"

__all__ = ["BuildOutput", "LineupResult", "PlayerRecord", "build_lineups", "__version__"]
