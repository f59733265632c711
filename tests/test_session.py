import numpy as np
import pytest

from shapes_boom.game import Action, GameConfig, GameSession, SessionState, ShapeType
from shapes_boom.storage import MemoryHighScoreStore

from conftest import fill_row, place


def test_starts_with_centered_piece(session):
    assert session.current_piece is not None
    assert session.current_piece.position == (4, 0)
    assert session.state is SessionState.FALLING
    assert session.score == 0


def test_rejects_non_positive_drop_interval():
    with pytest.raises(ValueError):
        GameSession(GameConfig(drop_interval=0))


def test_gravity_waits_until_interval_is_exceeded(session):
    place(session, ShapeType.O, 4, 0)
    session.update(500)
    session.update(500)
    assert session.current_piece.y == 0
    session.update(1)
    assert session.current_piece.y == 1
    assert session.drop_counter == 0


def test_long_frame_drops_only_once(session):
    place(session, ShapeType.O, 4, 0)
    session.update(5000)
    assert session.current_piece.y == 1


def test_soft_drop_resets_drop_counter(session):
    place(session, ShapeType.O, 4, 0)
    session.update(900)
    session.handle(Action.SOFT_DROP)
    assert session.current_piece.y == 1
    assert session.drop_counter == 0
    session.update(900)
    assert session.current_piece.y == 1


def test_move_left_at_wall_reverts(session):
    place(session, ShapeType.O, 0, 0)
    session.handle(Action.LEFT)
    assert session.current_piece.x == 0
    session.handle(Action.RIGHT)
    assert session.current_piece.x == 1


def test_rotate_via_input(session):
    piece = place(session, ShapeType.T, 4, 5)
    session.handle(Action.ROTATE_CW)
    assert piece.matrix.tolist() == [[0, 1, 0], [0, 1, 1], [0, 1, 0]]
    session.handle(Action.ROTATE_CCW)
    assert piece.matrix.tolist() == [[0, 1, 0], [1, 1, 1], [0, 0, 0]]


def test_none_action_changes_nothing(session):
    piece = place(session, ShapeType.T, 4, 5)
    info = session.handle(Action.NONE)
    assert piece.position == (4, 5)
    assert info["score"] == 0


def test_landing_merges_and_spawns_next_piece(session):
    landed = place(session, ShapeType.O, 0, 18)
    assert session.drop()
    assert session.grid.cells[18:20, 0:2].tolist() == [[2, 2], [2, 2]]
    assert session.current_piece is not landed
    assert session.current_piece.position == (4, 0)
    assert session.pieces_locked == 1
    assert session.state is SessionState.FALLING


def test_single_row_clear_scores_ten(session, store):
    fill_row(session.grid.cells, 19, value=1)
    session.grid.cells[19, 0:2] = 0
    place(session, ShapeType.O, 0, 18)
    session.drop()
    assert session.score == 10
    assert session.lines_cleared_total == 1
    assert session.grid.cells[19].tolist() == [2, 2] + [0] * 8
    assert store.get_high_score() == 10


def test_double_row_clear(session):
    for y in (18, 19):
        fill_row(session.grid.cells, y, value=5)
        session.grid.cells[y, 0:2] = 0
    place(session, ShapeType.O, 0, 18)
    session.drop()
    assert session.score == 20
    assert session.grid.filled_count() == 0


def test_high_score_updated_when_surpassed():
    store = MemoryHighScoreStore(100)
    session = GameSession(GameConfig(random_seed=1), store=store)
    assert session.high_score == 100
    session.score = 110
    session.score_rows(1)
    assert session.score == 120
    assert session.high_score == 120
    assert store.get_high_score() == 120


def test_high_score_kept_when_not_surpassed():
    store = MemoryHighScoreStore(500)
    session = GameSession(GameConfig(random_seed=1), store=store)
    session.score_rows(3)
    assert session.score == 30
    assert store.get_high_score() == 500


def test_score_listener_receives_changes(session):
    seen = []
    session.add_score_listener(lambda score, high: seen.append((score, high)))
    session.score_rows(0)
    assert seen == []
    session.score_rows(2)
    assert seen == [(20, 20)]


def test_spawn_overlap_triggers_game_over(session, store):
    seen = []
    session.add_score_listener(lambda score, high: seen.append(score))
    session.score = 50
    store.set_high_score(50)
    session.high_score = 50
    for y in range(4):
        fill_row(session.grid.cells, y, value=3, gap=9)
    place(session, ShapeType.O, 0, 18)
    session.drop()
    assert session.game_overs == 1
    assert session.score == 0
    assert session.grid.filled_count() == 0
    assert session.high_score == 50
    assert seen == [0]
    # the piece spawned into the stack stays active on the cleared board
    assert session.current_piece is not None
    assert session.current_piece.position == (4, 0)
    assert session.state is SessionState.FALLING


def test_same_seed_same_pieces():
    a = GameSession(GameConfig(random_seed=42))
    b = GameSession(GameConfig(random_seed=42))
    for _ in range(10):
        assert a.current_piece.kind == b.current_piece.kind
        a.reset()
        b.reset()


def test_state_overlay_marks_falling_piece(session):
    place(session, ShapeType.O, 4, 0)
    session.grid.cells[19, 0] = 1
    state = session.get_state()
    assert state[0, 4] == -2 and state[1, 5] == -2
    assert state[19, 0] == 1
    assert session.grid.cells[0, 4] == 0


def test_frame_is_a_snapshot(session):
    place(session, ShapeType.O, 4, 3)
    frame = session.frame()
    assert frame.position == (4, 3)
    frame.grid[0, 0] = 7
    frame.matrix[0, 0] = 0
    assert session.grid.cells[0, 0] == 0
    assert session.current_piece.matrix[0, 0] == 2


def test_reset_clears_board_and_score(session):
    session.grid.cells[19, :5] = 1
    session.score = 40
    session.reset()
    assert session.score == 0
    assert session.grid.filled_count() == 0
    assert np.count_nonzero(session.get_state()) > 0


class ReadOnlyStore(MemoryHighScoreStore):
    def set_high_score(self, value: int) -> None:
        raise OSError("read-only file system")


def test_failed_high_score_write_does_not_stall_play():
    session = GameSession(GameConfig(random_seed=5), store=ReadOnlyStore())
    fill_row(session.grid.cells, 19, value=1)
    session.grid.cells[19, 0:2] = 0
    landed = place(session, ShapeType.O, 0, 18)
    assert session.drop()
    assert session.score == 10
    assert session.high_score == 10
    assert session.current_piece is not landed
    assert not session.grid.collides(session.current_piece)
    assert session.state is SessionState.FALLING
