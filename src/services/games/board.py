"""
Tic-Tac-Toe Board Model

The 3x3 board, the win detector and the computer opponent's move
selection. Cells are addressed 1-9 by players and 0-8 internally,
row-major (index = row * 3 + col).
"""

import random
from enum import Enum
from typing import Iterable, List, Optional, Tuple


class Marker(Enum):
    """Player markers, X always moves first"""
    X = "X"
    O = "O"

    @property
    def opponent(self) -> 'Marker':
        return Marker.O if self is Marker.X else Marker.X


class MatchOutcome(Enum):
    """Result of evaluating a board"""
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"
    IN_PROGRESS = "in_progress"

    @property
    def is_terminal(self) -> bool:
        return self is not MatchOutcome.IN_PROGRESS

    @property
    def winner(self) -> Optional[Marker]:
        if self is MatchOutcome.X_WINS:
            return Marker.X
        if self is MatchOutcome.O_WINS:
            return Marker.O
        return None


BOARD_SIDE = 3
CELL_COUNT = BOARD_SIDE * BOARD_SIDE
CENTER_INDEX = CELL_COUNT // 2


def _winning_lines(side: int) -> Tuple[Tuple[int, ...], ...]:
    """Rows, then columns, then the two diagonals"""
    rows = [tuple(r * side + c for c in range(side)) for r in range(side)]
    cols = [tuple(r * side + c for r in range(side)) for c in range(side)]
    diagonals = [
        tuple(i * side + i for i in range(side)),
        tuple(i * side + (side - 1 - i) for i in range(side)),
    ]
    return tuple(rows + cols + diagonals)


WINNING_LINES = _winning_lines(BOARD_SIDE)

_WIN_OUTCOMES = {Marker.X: MatchOutcome.X_WINS, Marker.O: MatchOutcome.O_WINS}


class Board:
    """
    A 3x3 tic-tac-toe board

    Cells hold a Marker or None when empty. The only way to change a
    board is place(), which never overwrites a marked cell.
    """

    def __init__(self, cells: Optional[Iterable[Optional[Marker]]] = None):
        if cells is None:
            self._cells: List[Optional[Marker]] = [None] * CELL_COUNT
        else:
            self._cells = list(cells)
            if len(self._cells) != CELL_COUNT:
                raise ValueError(f"A board has {CELL_COUNT} cells, got {len(self._cells)}")

    @classmethod
    def from_string(cls, layout: str) -> 'Board':
        """
        Build a board from a 9 character layout such as "XXX______"

        'X' and 'O' are markers, '_', '.' and ' ' are empty cells.
        """
        cells = []
        for char in layout:
            if char.upper() in ('X', 'O'):
                cells.append(Marker(char.upper()))
            elif char in ('_', '.', ' '):
                cells.append(None)
            else:
                raise ValueError(f"Invalid board character: {char!r}")
        return cls(cells)

    @property
    def cells(self) -> Tuple[Optional[Marker], ...]:
        """Read-only view of the 9 cells"""
        return tuple(self._cells)

    def cell(self, index: int) -> Optional[Marker]:
        """Marker at a 0-based index"""
        return self._cells[index]

    def is_empty(self, index: int) -> bool:
        return self._cells[index] is None

    def empty_cells(self) -> List[int]:
        """0-based indices of all empty cells, in board order"""
        return [i for i, cell in enumerate(self._cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def place(self, cell_number: int, marker: Marker) -> bool:
        """
        Place a marker on a cell

        Args:
            cell_number: Cell in 1-9, already range-checked by the caller
            marker: Marker to place

        Returns:
            True if the cell was empty and now holds the marker, False if it
            was occupied (the board is left unchanged)
        """
        index = cell_number - 1
        if self._cells[index] is not None:
            return False

        self._cells[index] = marker
        return True

    def symbols(self) -> List[str]:
        """Display characters for the 9 cells: ' ' for empty, 'X' or 'O'"""
        return [cell.value if cell is not None else ' ' for cell in self._cells]

    def rows(self) -> List[List[str]]:
        """Display characters as 3 rows of 3"""
        symbols = self.symbols()
        return [symbols[r * BOARD_SIDE:(r + 1) * BOARD_SIDE] for r in range(BOARD_SIDE)]

    def copy(self) -> 'Board':
        return Board(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        layout = ''.join(cell.value if cell is not None else '_' for cell in self._cells)
        return f"Board({layout!r})"


def evaluate(board: Board) -> MatchOutcome:
    """
    Evaluate a board

    The first complete line of one marker, in WINNING_LINES order, decides
    the winner. A full board without a winning line is a draw.
    """
    cells = board.cells
    for a, b, c in WINNING_LINES:
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return _WIN_OUTCOMES[cells[a]]

    if board.is_full():
        return MatchOutcome.DRAW

    return MatchOutcome.IN_PROGRESS


def choose_ai_move(board: Board, rng: Optional[random.Random] = None) -> int:
    """
    Pick the computer's cell as a 0-based index

    Takes the center when it is free, otherwise a uniformly random empty
    cell. It never blocks the opponent and never looks for its own win.
    The board must have at least one empty cell.
    """
    if board.is_empty(CENTER_INDEX):
        return CENTER_INDEX

    empty = board.empty_cells()
    if not empty:
        raise ValueError("No empty cell left for the computer to play")

    return (rng or random).choice(empty)
