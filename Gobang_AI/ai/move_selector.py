"""Candidate move generation (8-neighbour adjacency) and last-move ordering."""


NEIGHBORS_8 = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def has_neighbor(board, row, col):
    """Return True if any of the 8 surrounding cells holds a stone."""
    occupied = board.occupied
    for dr, dc in NEIGHBORS_8:
        if (row + dr, col + dc) in occupied:
            return True
    return False


def order_moves(board, candidates):
    """
    Pull the neighbours of the most recent move to the front of candidates.
    Each neighbour found is moved to the front in NEIGHBORS_8 scan order, so the
    last scanned neighbour ends up first. Nothing is added or dropped.
    """
    ordered = list(candidates)
    last = board.last_move
    if last is None:
        return ordered
    lr, lc = last
    for dr, dc in NEIGHBORS_8:
        cell = (lr + dr, lc + dc)
        try:
            idx = ordered.index(cell)
        except ValueError:
            continue
        ordered.insert(0, ordered.pop(idx))
    return ordered


def generate_candidates(board):
    """
    Empty cells with at least one occupied neighbour, ordered for alpha-beta.
    An empty board has no candidates.
    """
    size = board.size
    occupied = board.occupied
    cells = set()
    for row, col in occupied:
        for dr, dc in NEIGHBORS_8:
            nr, nc = row + dr, col + dc
            if 0 <= nr < size and 0 <= nc < size and (nr, nc) not in occupied:
                cells.add((nr, nc))
    return order_moves(board, sorted(cells))
