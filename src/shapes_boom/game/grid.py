from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .pieces import Piece


class GameGrid:
    """Fixed-size cell matrix for landed blocks.

    The grid uses 0 for empty cells and positive integers for filled cells.
    Integer values are piece-type ids, which the renderer also uses as colour
    indices. Row 0 is the top of the board.
    """

    def __init__(self, width: int, height: int) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.cells = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.cells.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def collides(self, piece: "Piece") -> bool:
        """True if any occupied piece cell is off the board or on a filled cell."""
        for x, y, _ in piece.cells():
            # Bounds first so negative indices never wrap around.
            if not self.is_inside(x, y):
                return True
            if self.cells[y, x] != 0:
                return True
        return False

    def merge(self, piece: "Piece") -> None:
        """Copy the piece's occupied cells into the grid.

        Assumes the pose has already been checked with `collides`.
        """
        for x, y, value in piece.cells():
            self.cells[y, x] = value

    def is_row_full(self, y: int) -> bool:
        return bool(np.all(self.cells[y] != 0))

    def clear_rows(self) -> int:
        """Remove full rows bottom-up, shifting everything above down by one.

        After a removal the same index is tested again, since the row that
        slid into it may be full as well.
        """
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_row_full(y):
                self.cells[1 : y + 1] = self.cells[0:y].copy()
                self.cells[0] = 0
                cleared += 1
            else:
                y -= 1
        return cleared

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def clone_state(self) -> np.ndarray:
        return self.cells.copy()
