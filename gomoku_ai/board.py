"""
Board class for the Gomoku engine.
Holds the grid, validates placements and detects wins.
"""

from contextlib import contextmanager

import numpy as np

from .config import (ALL_DIRECTIONS, BLACK, DEFAULT_BOARD_SIZE, EMPTY,
                     NEED_TO_WIN, OUT_OF_BOUNDS, ROLE_NAMES, WHITE)


_CELL_ALIASES = {name: role for role, name in ROLE_NAMES.items()}
_CELL_ALIASES.update({'empty': EMPTY, '': EMPTY})


def _parse_cell(value):
    """Convert an external cell value (int or 'black'/'white'/None) to a role."""
    if value is None:
        return EMPTY
    if isinstance(value, str):
        key = value.strip().lower()
        if key not in _CELL_ALIASES:
            raise ValueError(f"Unknown cell value: {value!r}")
        return _CELL_ALIASES[key]
    role = int(value)
    if role not in (BLACK, WHITE, EMPTY):
        raise ValueError(f"Unknown cell value: {value!r}")
    return role


class Board:
    """
    Square Gomoku board.

    Cells hold BLACK (1), WHITE (-1) or EMPTY (0). Reads outside the grid
    return OUT_OF_BOUNDS instead of raising.
    """

    def __init__(self, size=DEFAULT_BOARD_SIZE):
        """
        Initialize an empty board.

        Args:
            size: Number of rows and columns
        """
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self.board = [[EMPTY] * size for _ in range(size)]

    @classmethod
    def from_matrix(cls, matrix):
        """
        Build a board from a square matrix.

        Args:
            matrix: Nested lists or numpy array of 1/-1/0 values, or of
                'black'/'white'/None as sent by the game frontend

        Returns:
            New Board holding the same position
        """
        grid = np.asarray(matrix, dtype=object)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"Board must be a square matrix, got shape {grid.shape}")

        board = cls(grid.shape[0])
        for i in range(board.size):
            for j in range(board.size):
                board.board[i][j] = _parse_cell(grid[i, j])
        return board

    def to_array(self):
        """Snapshot of the grid as an int8 numpy array."""
        return np.array(self.board, dtype=np.int8)

    def in_bounds(self, i, j):
        return 0 <= i < self.size and 0 <= j < self.size

    def get(self, i, j):
        """Cell content at (i, j), or OUT_OF_BOUNDS off the board."""
        if not (0 <= i < self.size and 0 <= j < self.size):
            return OUT_OF_BOUNDS
        return self.board[i][j]

    def put(self, i, j, role):
        """
        Place a stone.

        Returns:
            True if the stone was placed, False if the cell is off the board
            or already occupied
        """
        if not self.in_bounds(i, j) or self.board[i][j] != EMPTY:
            return False
        self.board[i][j] = role
        return True

    def remove(self, i, j):
        """
        Remove a stone.

        Returns:
            True if a stone was removed, False if there was nothing to remove
        """
        if not self.in_bounds(i, j) or self.board[i][j] == EMPTY:
            return False
        self.board[i][j] = EMPTY
        return True

    @contextmanager
    def placed(self, i, j, role):
        """
        Temporarily place a stone; it is removed when the block exits,
        whether normally, via break/return, or via an exception.
        """
        if not self.put(i, j, role):
            raise ValueError(f"Cannot place at ({i}, {j})")
        try:
            yield self
        finally:
            self.board[i][j] = EMPTY

    @property
    def stone_count(self):
        return sum(1 for row in self.board for cell in row if cell != EMPTY)

    def is_empty(self):
        return not any(any(row) for row in self.board)

    def is_full(self):
        return all(EMPTY not in row for row in self.board)

    def line_run(self, i, j, dx, dy, role):
        """
        Measure the run of `role` stones through (i, j) along one axis.
        The cell (i, j) itself is counted as a `role` stone.

        Returns:
            Tuple of (run length, number of open ends)
        """
        count = 1
        open_ends = 0
        for sign in (1, -1):
            x, y = i + sign * dx, j + sign * dy
            while 0 <= x < self.size and 0 <= y < self.size and self.board[x][y] == role:
                count += 1
                x += sign * dx
                y += sign * dy
            if 0 <= x < self.size and 0 <= y < self.size and self.board[x][y] == EMPTY:
                open_ends += 1
        return count, open_ends

    def winner_at(self, i, j):
        """
        Check whether the stone at (i, j) is part of five or more in a row.

        Returns:
            The winning role, or EMPTY if there is no win through (i, j)
        """
        role = self.get(i, j)
        if role == EMPTY or role == OUT_OF_BOUNDS:
            return EMPTY
        for dx, dy in ALL_DIRECTIONS:
            count, _ = self.line_run(i, j, dx, dy, role)
            if count >= NEED_TO_WIN:
                return role
        return EMPTY

    def get_winner(self):
        """
        Check the whole board for a winner.

        Returns:
            BLACK or WHITE for a win, EMPTY if there is no winner yet
        """
        for i in range(self.size):
            for j in range(self.size):
                role = self.board[i][j]
                if role == EMPTY:
                    continue

                for dx, dy in ALL_DIRECTIONS:
                    count = 0
                    while (0 <= i + dx * count < self.size and
                           0 <= j + dy * count < self.size and
                           self.board[i + dx * count][j + dy * count] == role):
                        count += 1

                    if count >= NEED_TO_WIN:
                        return role
        return EMPTY

    def is_game_over(self):
        """Check if the game is over (someone won or board is full)."""
        return self.get_winner() != EMPTY or self.is_full()

    def get_valid_moves(self):
        """Get all empty positions."""
        return [(i, j)
                for i in range(self.size)
                for j in range(self.size)
                if self.board[i][j] == EMPTY]

    def copy(self):
        new_board = Board(self.size)
        new_board.board = [row[:] for row in self.board]
        return new_board

    def display(self, extra_points=None):
        """
        Render the board as text.

        Args:
            extra_points: List of positions to mark with '?'

        Returns:
            String representation of the board
        """
        extra_positions = set(extra_points or [])

        result = '  '
        for j in range(self.size):
            result += f'{j:3}'
        result += '\n'

        for i in range(self.size):
            result += f'{i:2}'
            for j in range(self.size):
                if (i, j) in extra_positions:
                    result += '  ?'
                elif self.board[i][j] == BLACK:
                    result += '  O'
                elif self.board[i][j] == WHITE:
                    result += '  X'
                else:
                    result += '  -'
            result += '\n'

        return result
