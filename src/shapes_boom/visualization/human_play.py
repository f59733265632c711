from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, Optional

import pygame

from shapes_boom.game import Action, GameConfig, GameSession
from shapes_boom.storage import JsonHighScoreStore
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_a: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_d: Action.RIGHT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_s: Action.SOFT_DROP,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_w: Action.ROTATE_CW,
}

PANEL_WIDTH = 160


class ScoreBoard:
    """Holds the last values pushed by the session and draws them."""

    def __init__(self, score: int = 0, high_score: int = 0) -> None:
        self.score = score
        self.high_score = high_score

    def __call__(self, score: int, high_score: int) -> None:
        self.score = score
        self.high_score = high_score

    def draw(self, screen: pygame.Surface, font: pygame.font.Font, x: int, y: int) -> None:
        lines = [
            f"Score: {self.score}",
            f"High score: {self.high_score}",
            "Move: Left/Right or A/D",
            "Rotate: Up or W",
            "Drop: Down or S",
        ]
        for i, txt in enumerate(lines):
            img = font.render(txt, True, (230, 230, 230))
            screen.blit(img, (x, y + i * 22))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Shapes Boom with the keyboard.")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--scores", type=str, default="~/.shapes_boom/highscore.json",
                   help="Path of the JSON file holding the high score")
    p.add_argument("--cell-size", type=int, default=32)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--verbose", action="store_true")
    return p


def run(seed: Optional[int] = None, scores_path: str = "~/.shapes_boom/highscore.json",
        cell_size: int = 32, fps: int = 60) -> None:
    pygame.init()
    try:
        store = JsonHighScoreStore(Path(scores_path).expanduser())
        game = GameSession(GameConfig(random_seed=seed), store=store)
        scoreboard = ScoreBoard(game.score, game.high_score)
        game.add_score_listener(scoreboard)
        renderer = Renderer(cell_size=cell_size)

        board_w, board_h = renderer.board_size(game.grid.cells)
        margin = renderer.margin
        screen = pygame.display.set_mode((board_w + margin * 3 + PANEL_WIDTH, board_h + margin * 2))
        pygame.display.set_caption("Shapes Boom")
        font = pygame.font.SysFont(None, 24)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            game.handle(action)

            # Gravity: one tick per frame with the real elapsed time
            game.update(clock.tick(fps))

            renderer.draw(screen, game.frame())
            scoreboard.draw(screen, font, board_w + margin * 2, margin)
            pygame.display.flip()
        print(f"Final score: {game.score}  High score: {game.high_score}")
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run(seed=args.seed, scores_path=args.scores, cell_size=args.cell_size, fps=args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
