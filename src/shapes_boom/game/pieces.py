from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np

from .shapes import ShapeLibrary, ShapeType


def rotate_matrix(matrix: np.ndarray, direction: int) -> None:
    """Rotate a square matrix 90 degrees in place.

    Transposes, then mirrors each row for clockwise (`direction > 0`) or
    reverses the row order for counter-clockwise.
    """
    h, w = matrix.shape
    if h != w:
        raise ValueError(f"rotation needs a square matrix, got {h}x{w}")
    matrix[...] = matrix.T.copy()
    if direction > 0:
        matrix[...] = matrix[:, ::-1].copy()
    else:
        matrix[...] = matrix[::-1, :].copy()


@dataclass(eq=False)
class Piece:
    kind: ShapeType
    matrix: np.ndarray
    x: int = 0
    y: int = 0

    @property
    def size(self) -> int:
        return int(self.matrix.shape[1])

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (grid_x, grid_y, value) for each occupied cell."""
        ys, xs = np.nonzero(self.matrix)
        for dy, dx in zip(ys, xs):
            yield self.x + int(dx), self.y + int(dy), int(self.matrix[dy, dx])

    def translate(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def rotate(self, direction: int) -> None:
        rotate_matrix(self.matrix, direction)


def spawn_piece(rng: random.Random, grid_width: int, spawn_y: int = 0,
                kind: Optional[ShapeType] = None) -> Piece:
    """Create a new piece from a uniformly chosen template.

    The matrix is a private copy, so rotating the piece never touches the
    template or any other piece.
    """
    if kind is None:
        kind = rng.choice(ShapeLibrary.kinds())
    return Piece(kind=kind, matrix=ShapeLibrary.template(kind), x=grid_width // 2 - 1, y=spawn_y)
