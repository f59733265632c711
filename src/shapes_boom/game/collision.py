from __future__ import annotations

from .grid import GameGrid
from .pieces import Piece


def try_move(grid: GameGrid, piece: Piece, dx: int, dy: int) -> bool:
    """Translate the piece, undoing the move if the new pose collides."""
    piece.translate(dx, dy)
    if grid.collides(piece):
        piece.translate(-dx, -dy)
        return False
    return True


def kick_offsets(width: int):
    """Successive x shifts tried after a blocked rotation: +1, -2, +3, ...

    Applied cumulatively, so the piece visits x+1, x-1, x+2, ... An offset is
    only tried while the one after it stays at or below `width`; a 3 or 4 wide
    matrix gets +1, -2, +3 and a 2 wide one only +1.
    """
    offset = 1
    while True:
        following = -(offset + (1 if offset > 0 else -1))
        if following > width:
            return
        yield offset
        offset = following


def rotate_piece(grid: GameGrid, piece: Piece, direction: int) -> bool:
    """Rotate with a bounded horizontal wall-kick search.

    Returns False, with orientation and x restored, when no shift works.
    """
    origin_x = piece.x
    piece.rotate(direction)
    if not grid.collides(piece):
        return True
    for offset in kick_offsets(piece.size):
        piece.x += offset
        if not grid.collides(piece):
            return True
    piece.rotate(-direction)
    piece.x = origin_x
    return False
