import pytest

from queens_board import (
    Board,
    BoardState,
    History,
    Placement,
    Square,
    is_queen_at,
    normalize_solution,
)
from queens_errors import DuplicateSolution, InvalidSize


def placements(*squares):
    return tuple(Placement(Square(row, col)) for row, col in squares)


def test_initialize_populates_row_major_domain():
    board = Board()
    board.initialize(3)
    assert board.size == 3
    assert len(board) == 9
    assert board.squares == tuple(Square(r, c) for r in range(1, 4) for c in range(1, 4))
    assert Square(2, 3) in board
    assert Square(4, 1) not in board


@pytest.mark.parametrize("n", [0, -1, 2.5, "4", True])
def test_initialize_rejects_invalid_size(n):
    with pytest.raises(InvalidSize):
        Board().initialize(n)


def test_board_clear_discards_squares():
    board = Board()
    board.initialize(2)
    board.clear()
    assert len(board) == 0
    assert board.size is None
    assert Square(1, 1) not in board


def test_history_contains_only_after_record():
    history = History()
    solution = placements((1, 2), (2, 4), (3, 1), (4, 3))
    assert not history.contains(solution)
    history.record(solution)
    assert history.contains(solution)
    assert not history.contains(placements((1, 3), (2, 1), (3, 4), (4, 2)))
    assert len(history) == 1
    assert history.solutions == (solution,)


def test_history_rejects_recording_twice():
    history = History()
    solution = placements((1, 1))
    history.record(solution)
    with pytest.raises(DuplicateSolution):
        history.record(solution)


def test_reset_clears_history_and_resizes():
    state = BoardState()
    state.reset(4)
    solution = placements((1, 2), (2, 4), (3, 1), (4, 3))
    state.record_solution(solution)
    assert state.contains_solution(solution)

    state.reset(4)
    assert not state.contains_solution(solution)
    assert state.size == 4

    state.reset(5)
    assert state.size == 5
    assert len(state.board) == 25


def test_reset_with_invalid_size_keeps_state():
    state = BoardState()
    state.reset(4)
    with pytest.raises(InvalidSize):
        state.reset(0)
    assert state.size == 4
    assert len(state.board) == 16


def test_normalize_sorts_by_row_then_column():
    raw = placements((3, 1), (1, 2), (4, 3), (2, 4))
    normalized = normalize_solution(raw)
    assert normalized == placements((1, 2), (2, 4), (3, 1), (4, 3))
    assert normalize_solution(normalized) == normalized


def test_is_queen_at():
    solution = placements((1, 2), (2, 4))
    assert is_queen_at(solution, 1, 2)
    assert is_queen_at(solution, 2, 4)
    assert not is_queen_at(solution, 2, 1)
