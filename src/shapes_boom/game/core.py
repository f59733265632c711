from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, List, Optional, Tuple

import numpy as np

from ..storage import HighScoreStore, MemoryHighScoreStore
from .collision import rotate_piece, try_move
from .grid import GameGrid
from .pieces import Piece, spawn_piece
from .rules import ScoringRules

logger = logging.getLogger(__name__)

ScoreListener = Callable[[int, int], None]


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    SOFT_DROP = 3
    ROTATE_CW = 4
    ROTATE_CCW = 5


class SessionState(Enum):
    SPAWNING = "spawning"
    FALLING = "falling"
    LOCKING = "locking"
    CLEARING = "clearing"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    drop_interval: float = 1000.0
    random_seed: Optional[int] = None
    spawn_y: int = 0


@dataclass(frozen=True)
class Frame:
    """What a renderer needs for one frame. Arrays are copies."""

    grid: np.ndarray
    matrix: np.ndarray
    position: Tuple[int, int]


class GameSession:
    """Owns the grid, the active piece and the score for one game.

    Driven by `update(delta_time)` from whatever clock the caller has, and by
    `handle(action)` for player input. Every call completes before returning,
    so a renderer reading between calls always sees a consistent board.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None,
                 store: Optional[HighScoreStore] = None) -> None:
        self.config = config or GameConfig()
        if self.config.drop_interval <= 0:
            raise ValueError(f"drop_interval must be positive, got {self.config.drop_interval}")
        self.rules = rules or ScoringRules()
        self.store: HighScoreStore = store if store is not None else MemoryHighScoreStore()
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.score = 0
        self.high_score = self.store.get_high_score()
        self.drop_counter = 0.0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.game_overs = 0
        self.state = SessionState.SPAWNING
        self.current_piece: Optional[Piece] = None
        self._listeners: List[ScoreListener] = []
        self._spawn_piece()

    def add_score_listener(self, listener: ScoreListener) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self.score, self.high_score)

    def reset(self) -> None:
        self.grid.reset()
        self.score = 0
        self.drop_counter = 0.0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self._notify()
        self._spawn_piece()

    def _spawn_piece(self) -> None:
        self.state = SessionState.SPAWNING
        self.current_piece = spawn_piece(self.rng, self.grid.width, self.config.spawn_y)
        if self.grid.collides(self.current_piece):
            self._game_over()
        self.state = SessionState.FALLING

    def _game_over(self) -> None:
        # The freshly spawned piece stays active on the emptied board.
        self.state = SessionState.GAME_OVER
        self.game_overs += 1
        logger.info("game over with score %d (high score %d)", self.score, self.high_score)
        self.grid.reset()
        self.score = 0
        self._notify()

    def score_rows(self, rows_cleared: int) -> None:
        if rows_cleared <= 0:
            return
        self.score += self.rules.score_for_rows(rows_cleared)
        if self.score > self.high_score:
            self.high_score = self.score
            logger.info("new high score %d", self.high_score)
            try:
                self.store.set_high_score(self.high_score)
            except OSError as exc:
                # Play goes on with the in-memory value; the next record retries.
                logger.warning("could not save high score %d: %s", self.high_score, exc)
        self._notify()

    def _lock_piece(self) -> int:
        assert self.current_piece is not None
        self.state = SessionState.LOCKING
        self.grid.merge(self.current_piece)
        self.pieces_locked += 1
        self.state = SessionState.CLEARING
        rows = self.grid.clear_rows()
        if rows:
            logger.debug("cleared %d row(s)", rows)
        self.lines_cleared_total += rows
        self.score_rows(rows)
        self._spawn_piece()
        return rows

    def drop(self) -> bool:
        """Move the active piece down one row, locking it if it cannot move.

        Returns True when the piece locked.
        """
        self.drop_counter = 0.0
        if self.current_piece is None:
            return False
        if try_move(self.grid, self.current_piece, 0, 1):
            return False
        self._lock_piece()
        return True

    def move(self, dx: int) -> bool:
        if self.current_piece is None:
            return False
        return try_move(self.grid, self.current_piece, dx, 0)

    def rotate(self, direction: int = 1) -> bool:
        if self.current_piece is None:
            return False
        return rotate_piece(self.grid, self.current_piece, direction)

    def update(self, delta_time: float) -> None:
        """Advance the gravity clock by `delta_time` and drop if it is due."""
        self.drop_counter += delta_time
        if self.drop_counter > self.config.drop_interval:
            self.drop()

    def handle(self, action: Action) -> dict:
        if action == Action.LEFT:
            self.move(-1)
        elif action == Action.RIGHT:
            self.move(1)
        elif action == Action.SOFT_DROP:
            self.drop()
        elif action == Action.ROTATE_CW:
            self.rotate(1)
        elif action == Action.ROTATE_CCW:
            self.rotate(-1)
        return self.info()

    def info(self) -> dict:
        return {
            "score": self.score,
            "high_score": self.high_score,
            "lines_cleared_total": self.lines_cleared_total,
            "pieces_locked": self.pieces_locked,
            "game_overs": self.game_overs,
        }

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid; negative marks the falling piece
        state = self.grid.clone_state()
        if self.current_piece is not None:
            for x, y, value in self.current_piece.cells():
                if self.grid.is_inside(x, y):
                    state[y, x] = -value
        return state

    def frame(self) -> Frame:
        assert self.current_piece is not None
        return Frame(
            grid=self.grid.clone_state(),
            matrix=self.current_piece.matrix.copy(),
            position=self.current_piece.position,
        )
