from __future__ import annotations

from typing import Callable, Tuple

import numpy as np
import pygame

from shapes_boom.game import Frame
from .palette import OUTLINE_COLOR, Color, color_for_value


class Renderer:
    """Draws a `Frame` onto a pygame surface.

    Only reads the frame; it never touches the session that produced it.
    """

    def __init__(self, cell_size: int = 32, margin: int = 20,
                 color_for: Callable[[int], Color] = color_for_value) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.color_for = color_for

    def board_size(self, grid: np.ndarray) -> Tuple[int, int]:
        h, w = grid.shape
        return w * self.cell_size, h * self.cell_size

    def draw_matrix(self, surf: pygame.Surface, matrix: np.ndarray, offset: Tuple[int, int]) -> None:
        ox, oy = offset
        h, w = matrix.shape
        for y in range(h):
            for x in range(w):
                v = int(matrix[y, x])
                if v == 0:
                    continue
                rect = pygame.Rect(
                    (x + ox) * self.cell_size,
                    (y + oy) * self.cell_size,
                    self.cell_size,
                    self.cell_size,
                )
                pygame.draw.rect(surf, self.color_for(v), rect)
                pygame.draw.rect(surf, OUTLINE_COLOR, rect, 1)

    def board_surface(self, frame: Frame) -> pygame.Surface:
        surf = pygame.Surface(self.board_size(frame.grid))
        surf.fill(self.color_for(0))
        self.draw_matrix(surf, frame.grid, (0, 0))
        self.draw_matrix(surf, frame.matrix, frame.position)
        return surf

    def draw(self, screen: pygame.Surface, frame: Frame) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self.board_surface(frame), (self.margin, self.margin))
