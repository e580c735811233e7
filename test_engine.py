"""
Tests for the engine building blocks: board, win checker, move commands,
move history and move validation.
"""

import pytest

from engine.board import Board, LineKind
from engine.errors import (
    CellOccupiedError,
    InvalidCommandStateError,
    OutOfRangeError,
)
from engine.game_state import Cell, GameStatus, Mark, make_marks
from engine.history import MoveHistory
from engine.move_command import CommandState, MoveCommand
from engine.move_validator import MoveValidator
from engine.win_checker import LineEvaluator

ALL_CELLS = [(row, col) for row in range(3) for col in range(3)]


@pytest.fixture
def marks():
    return make_marks(("X", "O"))


@pytest.fixture
def board():
    return Board()


def fill(board, layout, marks):
    """Place marks from a 3-string layout like ["XO ", " X ", "  O"]."""
    by_glyph = {m.glyph: m for m in marks}
    for row, text in enumerate(layout):
        for col, glyph in enumerate(text):
            if glyph != " ":
                board.place(row, col, by_glyph[glyph])


# ==================== MARKS AND CELLS ====================

def test_marks_compare_by_identity():
    a, b = make_marks(("X", "X"))
    assert a != b
    assert a == a
    assert len({a, b}) == 2
    assert str(a) == "X"


def test_make_marks_needs_two_glyphs():
    with pytest.raises(ValueError):
        make_marks(("X",))


def test_cell_index_round_trip():
    assert Cell(0, 0).index == 1
    assert Cell(1, 1).index == 5
    assert Cell(2, 2).index == 9
    assert Cell.from_index(6) == Cell(1, 2)


@pytest.mark.parametrize("index", [0, 10, -1])
def test_cell_from_index_out_of_range(index):
    with pytest.raises(OutOfRangeError):
        Cell.from_index(index)


def test_cell_rejects_bad_coordinates():
    with pytest.raises(OutOfRangeError):
        Cell(3, 0)


def test_game_status_terminal_flags():
    assert not GameStatus.AWAITING_MOVE.is_terminal
    assert GameStatus.WON.is_terminal
    assert GameStatus.TIED.is_terminal


# ==================== BOARD ====================

def test_new_board_is_empty(board):
    assert all(board.get(r, c) is None for r, c in ALL_CELLS)
    assert len(board.empty_cells()) == 9
    assert board.move_count == 0
    assert not board.is_full()


@pytest.mark.parametrize("row,col", ALL_CELLS)
def test_place_once_then_occupied(board, marks, row, col):
    x, o = marks
    board.place(row, col, x)
    assert board.get(row, col) is x

    with pytest.raises(CellOccupiedError):
        board.place(row, col, o)

    # Board unchanged by the rejected placement
    assert board.get(row, col) is x
    assert board.move_count == 1


@pytest.mark.parametrize("row,col", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_range(board, marks, row, col):
    with pytest.raises(OutOfRangeError):
        board.get(row, col)
    with pytest.raises(OutOfRangeError):
        board.place(row, col, marks[0])


def test_restore_bypasses_occupancy(board, marks):
    x, _ = marks
    board.place(1, 1, x)
    board._restore(1, 1, None)
    assert board.is_empty(1, 1)


def test_lines_canonical_order(board, marks):
    lines = board.lines()
    assert [(line.kind, line.index) for line in lines] == [
        (LineKind.ROW, 0), (LineKind.COLUMN, 0),
        (LineKind.ROW, 1), (LineKind.COLUMN, 1),
        (LineKind.ROW, 2), (LineKind.COLUMN, 2),
        (LineKind.DIAGONAL, 0), (LineKind.ANTI_DIAGONAL, 0),
    ]
    assert lines[-1].cells == (Cell(0, 2), Cell(1, 1), Cell(2, 0))
    assert all(len(line.cells) == 3 for line in lines)


def test_lines_show_occupants(board, marks):
    x, o = marks
    board.place(0, 2, x)
    board.place(2, 0, o)
    anti = board.lines()[7]
    assert anti.occupants[0] is x
    assert anti.occupants[1] is None
    assert anti.occupants[2] is o


def test_full_board(board, marks):
    fill(board, ["XOX", "XOO", "OXX"], marks)
    assert board.is_full()
    assert board.empty_cells() == []


def test_display_grid(board, marks):
    fill(board, ["X  ", " O ", "   "], marks)
    assert board.display_grid(".") == [
        ["X", ".", "."],
        [".", "O", "."],
        [".", ".", "."],
    ]


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("layout,kind,index", [
    (["XXX", "OO ", "   "], LineKind.ROW, 0),
    (["O  ", "XXX", "O  "], LineKind.ROW, 1),
    (["XO ", "XO ", "X  "], LineKind.COLUMN, 0),
    (["O X", " OX", "  X"], LineKind.COLUMN, 2),
    (["XO ", "OX ", "  X"], LineKind.DIAGONAL, 0),
    (["O X", " X ", "XO "], LineKind.ANTI_DIAGONAL, 0),
])
def test_find_winning_line(board, marks, layout, kind, index):
    x, o = marks
    fill(board, layout, marks)
    evaluator = LineEvaluator()

    line = evaluator.find_winning_line(board, x)
    assert line is not None
    assert (line.kind, line.index) == (kind, index)
    assert not evaluator.has_won(board, o)


def test_empty_and_mixed_lines_do_not_win(board, marks):
    x, o = marks
    fill(board, ["XXO", "   ", "   "], marks)
    evaluator = LineEvaluator()
    row0, _, row1 = board.lines()[:3]

    assert not evaluator.is_winning_for(row0, x)
    assert not evaluator.is_winning_for(row0, o)
    assert not evaluator.is_winning_for(row1, x)


def test_same_glyph_marks_are_not_confused(board):
    first, second = make_marks(("X", "X"))
    board.place(0, 0, first)
    board.place(0, 1, first)
    board.place(0, 2, second)
    evaluator = LineEvaluator()

    assert not evaluator.has_won(board, first)
    assert not evaluator.has_won(board, second)
    assert board.display_grid()[0] == ["X", "X", "X"]


# ==================== MOVE COMMAND ====================

def test_command_execute_and_undo(board, marks):
    x, _ = marks
    command = MoveCommand(board, Cell(1, 2), x)
    assert command.state is CommandState.PENDING

    command.execute()
    assert command.state is CommandState.EXECUTED
    assert command.previous_value is None
    assert board.get(1, 2) is x

    command.undo()
    assert command.state is CommandState.UNDONE
    assert board.is_empty(1, 2)

    command.redo()
    assert command.state is CommandState.EXECUTED
    assert board.get(1, 2) is x


def test_command_on_occupied_cell_stays_pending(board, marks):
    x, o = marks
    board.place(0, 0, x)
    command = MoveCommand(board, Cell(0, 0), o)

    with pytest.raises(CellOccupiedError):
        command.execute()

    assert command.state is CommandState.PENDING
    assert board.get(0, 0) is x


def test_command_state_misuse(board, marks):
    x, _ = marks
    command = MoveCommand(board, Cell(0, 0), x)

    with pytest.raises(InvalidCommandStateError):
        command.undo()
    with pytest.raises(InvalidCommandStateError):
        command.redo()

    command.execute()
    with pytest.raises(InvalidCommandStateError):
        command.execute()
    with pytest.raises(InvalidCommandStateError):
        command.redo()

    command.undo()
    with pytest.raises(InvalidCommandStateError):
        command.undo()


# ==================== MOVE HISTORY ====================

def play(board, history, mark, row, col):
    command = MoveCommand(board, Cell(row, col), mark)
    command.execute()
    history.push(command)
    return command


def test_history_undo_redo(board, marks):
    x, o = marks
    history = MoveHistory()
    first = play(board, history, x, 0, 0)
    second = play(board, history, o, 1, 1)
    assert history.entries() == (first, second)

    assert history.undo_last() is second
    assert board.is_empty(1, 1)
    assert history.can_redo

    assert history.redo_last() is second
    assert board.get(1, 1) is o
    assert history.entries() == (first, second)
    assert not history.can_redo
    assert history.redo_last() is None


def test_history_empty_is_noop():
    history = MoveHistory()
    assert history.undo_last() is None
    assert history.redo_last() is None
    assert len(history) == 0


def test_history_push_discards_redo(board, marks):
    x, o = marks
    history = MoveHistory()
    play(board, history, x, 0, 0)
    history.undo_last()

    play(board, history, x, 2, 2)
    assert history.redo_last() is None
    assert board.is_empty(0, 0)


def test_history_keeps_single_redo_slot(board, marks):
    x, o = marks
    history = MoveHistory()
    first = play(board, history, x, 0, 0)
    play(board, history, o, 1, 1)

    history.undo_last()
    history.undo_last()
    assert history.redo_last() is first
    assert history.redo_last() is None
    assert board.get(0, 0) is x
    assert board.is_empty(1, 1)


def test_history_rejects_unexecuted(board, marks):
    history = MoveHistory()
    with pytest.raises(InvalidCommandStateError):
        history.push(MoveCommand(board, Cell(0, 0), marks[0]))


def test_history_clear(board, marks):
    history = MoveHistory()
    play(board, history, marks[0], 0, 0)
    history.undo_last()
    history.clear()
    assert not history.can_undo
    assert not history.can_redo


# ==================== MOVE VALIDATOR ====================

@pytest.mark.parametrize("text,cell", [
    ("1", Cell(0, 0)),
    (" 5 ", Cell(1, 1)),
    ("9", Cell(2, 2)),
    ("0 2", Cell(0, 2)),
    ("2,1", Cell(2, 1)),
])
def test_validator_accepts(text, cell):
    result = MoveValidator().parse(text)
    assert result.is_valid
    assert result.cell == cell


@pytest.mark.parametrize("text", ["", "   ", "0", "10", "3 0", "a", "1 2 3"])
def test_validator_rejects(text):
    result = MoveValidator().parse(text)
    assert not result.is_valid
    assert result.cell is None
    assert result.error_message
