"""Five-in-a-row detection and scoped stone simulation."""

from contextlib import contextmanager

try:
    from Board import AI, HUMAN, BOARD_SIZE
except ImportError:
    from Gobang_AI.Board import AI, HUMAN, BOARD_SIZE


DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


@contextmanager
def simulate(board, side, cell):
    board.place(side, cell)
    try:
        yield
    finally:
        board.undo(side, cell)


def has_five_in_a_row(occupied, size=BOARD_SIZE):
    """Return True if occupied holds five consecutive cells in any line direction."""
    for row in range(size):
        for col in range(size):
            if (row, col) not in occupied:
                continue
            for dr, dc in DIRECTIONS:
                end_row, end_col = row + 4 * dr, col + 4 * dc
                if not (0 <= end_row < size and 0 <= end_col < size):
                    continue
                if all((row + k * dr, col + k * dc) in occupied for k in range(1, 5)):
                    return True
    return False


def winner(board):
    """Return the side owning a five, or None."""
    for side in (AI, HUMAN):
        if has_five_in_a_row(board.stones(side), board.size):
            return side
    return None
