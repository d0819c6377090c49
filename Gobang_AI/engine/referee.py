"""Validation of human moves before they reach the board."""


def check_move(move, board):
    """
    Validate a move against format, bounds, and occupancy.
    Raises ValueError on invalid moves.
    """
    try:
        row, col = move
    except (TypeError, ValueError) as exc:
        raise ValueError("Move must be a (row, col) pair") from exc
    if not isinstance(row, int) or not isinstance(col, int):
        raise ValueError("Move coordinates must be integers")
    if not board.in_bounds(row, col):
        raise ValueError("Move out of bounds")
    if not board.is_empty(row, col):
        raise ValueError("Cell already occupied")
    return True
