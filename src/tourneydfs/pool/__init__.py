"""Lineup pool utilities (contest export)."""

from .export import ContestExportError, export_lineups_to_csv, slot_headers

__all__ = [
    "ContestExportError",
    "export_lineups_to_csv",
    "slot_headers",
]
