from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    points_per_row: int = 10

    def score_for_rows(self, rows: int) -> int:
        if rows <= 0:
            return 0
        return rows * self.points_per_row
