from __future__ import annotations

import os

import numpy as np
import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from shapes_boom.game import GameConfig, GameSession, Piece, ShapeLibrary, ShapeType
from shapes_boom.storage import MemoryHighScoreStore


def make_piece(kind: ShapeType, x: int = 0, y: int = 0) -> Piece:
    return Piece(kind=kind, matrix=ShapeLibrary.template(kind), x=x, y=y)


@pytest.fixture
def store() -> MemoryHighScoreStore:
    return MemoryHighScoreStore()


@pytest.fixture
def session(store: MemoryHighScoreStore) -> GameSession:
    return GameSession(GameConfig(random_seed=7), store=store)


def place(session: GameSession, kind: ShapeType, x: int, y: int) -> Piece:
    """Replace the active piece with a known shape at a known position."""
    piece = make_piece(kind, x, y)
    session.current_piece = piece
    return piece


def fill_row(cells: np.ndarray, y: int, value: int = 1, gap: int | None = None) -> None:
    cells[y, :] = value
    if gap is not None:
        cells[y, gap] = 0
