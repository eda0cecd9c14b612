"""Data models for player pools."""

from .player import PlayerRecord

__all__ = ["PlayerRecord"]
