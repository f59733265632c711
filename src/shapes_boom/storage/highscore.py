from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, Union

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def get_high_score(self) -> int: ...

    def set_high_score(self, value: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process only."""

    def __init__(self, value: int = 0) -> None:
        self.value = max(0, int(value))

    def get_high_score(self) -> int:
        return self.value

    def set_high_score(self, value: int) -> None:
        self.value = int(value)


class JsonHighScoreStore:
    """Single-value high score persisted as ``{"high_score": n}``.

    Anything that cannot be read back as a non-negative integer counts as 0.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def get_high_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("could not read high score from %s: %s", self.path, exc)
            return 0
        value = data.get("high_score", 0) if isinstance(data, dict) else 0
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return 0
        return value

    def set_high_score(self, value: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"high_score": int(value)}, indent=2), encoding="utf-8")
