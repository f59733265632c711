import pygame
import pytest

from shapes_boom.game import GameConfig, GameSession, ShapeType
from shapes_boom.rl.random_agent import run_random
from shapes_boom.visualization.human_play import KEY_TO_ACTION, ScoreBoard, build_parser

from conftest import fill_row, place


@pytest.fixture
def _pygame():
    pygame.init()
    yield
    pygame.quit()


def test_random_agent_runs(capsys):
    total = run_random(steps=20, seed=0)
    assert isinstance(total, float)
    assert total >= 0.0
    assert "Random agent total reward" in capsys.readouterr().out


def test_scoreboard_follows_session():
    session = GameSession(GameConfig(random_seed=2))
    board = ScoreBoard(session.score, session.high_score)
    session.add_score_listener(board)
    fill_row(session.grid.cells, 19, value=1)
    session.grid.cells[19, 0:2] = 0
    place(session, ShapeType.O, 0, 18)
    session.drop()
    assert (board.score, board.high_score) == (10, 10)


def test_scoreboard_draws_text(_pygame):
    board = ScoreBoard(30, 120)
    surf = pygame.Surface((240, 140))
    surf.fill((0, 0, 0))
    board.draw(surf, pygame.font.SysFont(None, 20), 4, 4)
    assert pygame.surfarray.array3d(surf).any()


def test_keyboard_map_and_options():
    assert pygame.K_UP in KEY_TO_ACTION and pygame.K_w in KEY_TO_ACTION
    args = build_parser().parse_args(["--seed", "3", "--fps", "30"])
    assert args.seed == 3 and args.fps == 30 and args.cell_size == 32
