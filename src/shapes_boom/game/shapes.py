from __future__ import annotations

from enum import IntEnum
from typing import Dict, List

import numpy as np


class ShapeType(IntEnum):
    T = 1
    O = 2
    L = 3
    S = 4
    Z = 5
    I = 6
    J = 7


def _template(rows: List[List[int]]) -> np.ndarray:
    arr = np.array(rows, dtype=np.int8)
    arr.flags.writeable = False
    return arr


# Rotation-0 layouts. Every matrix is square so in-place rotation is uniform.
TEMPLATES: Dict[ShapeType, np.ndarray] = {
    ShapeType.T: _template([[0, 1, 0], [1, 1, 1], [0, 0, 0]]),
    ShapeType.O: _template([[2, 2], [2, 2]]),
    ShapeType.L: _template([[0, 3, 0], [0, 3, 0], [0, 3, 3]]),
    ShapeType.S: _template([[0, 4, 4], [4, 4, 0], [0, 0, 0]]),
    ShapeType.Z: _template([[5, 5, 0], [0, 5, 5], [0, 0, 0]]),
    ShapeType.I: _template([[0, 6, 0, 0], [0, 6, 0, 0], [0, 6, 0, 0], [0, 6, 0, 0]]),
    ShapeType.J: _template([[7, 0, 0], [7, 7, 7], [0, 0, 0]]),
}


class ShapeLibrary:
    """Immutable catalog of piece templates.

    Templates are read-only arrays; callers only ever receive copies.
    """

    @staticmethod
    def kinds() -> List[ShapeType]:
        return list(ShapeType)

    @staticmethod
    def template(kind: ShapeType) -> np.ndarray:
        """Return a fresh, writeable copy of the rotation-0 matrix for `kind`."""
        return TEMPLATES[ShapeType(kind)].copy()

    @staticmethod
    def width(kind: ShapeType) -> int:
        return int(TEMPLATES[ShapeType(kind)].shape[1])
