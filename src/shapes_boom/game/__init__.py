"""Game module for Shapes Boom.

Exports the core game engine and supporting classes:
- GameGrid: Grid representation, collision test, merge and row clearing
- Piece: Runtime piece with in-place rotation
- ShapeLibrary / ShapeType: Catalog of piece templates
- ScoringRules: Points awarded per cleared row
- GameSession: Spawn, gravity, lock, clear and game-over cycle
"""

from .shapes import ShapeLibrary, ShapeType
from .grid import GameGrid
from .pieces import Piece, rotate_matrix, spawn_piece
from .collision import kick_offsets, rotate_piece, try_move
from .rules import ScoringRules
from .core import Action, Frame, GameConfig, GameSession, SessionState

__all__ = [
    "ShapeLibrary",
    "ShapeType",
    "GameGrid",
    "Piece",
    "rotate_matrix",
    "spawn_piece",
    "kick_offsets",
    "rotate_piece",
    "try_move",
    "ScoringRules",
    "Action",
    "Frame",
    "GameConfig",
    "GameSession",
    "SessionState",
]
