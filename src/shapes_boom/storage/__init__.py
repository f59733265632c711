"""High score persistence backends."""

from .highscore import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore

__all__ = ["HighScoreStore", "JsonHighScoreStore", "MemoryHighScoreStore"]
