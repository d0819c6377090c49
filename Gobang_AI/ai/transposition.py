"""Zobrist hashing and evaluation cache helpers."""

import random

try:
    from Board import BLACK, BOARD_SIZE
except ImportError:
    from Gobang_AI.Board import BLACK, BOARD_SIZE


def zobrist_init(size=BOARD_SIZE, seed=None):
    rng = random.Random(seed)
    return [[rng.getrandbits(64) for _ in range(2)] for _ in range(size * size)]


def _color_index(color):
    return 0 if color == BLACK else 1


class Zobrist:
    """Incremental 64-bit fingerprint; toggling the same stone twice restores the hash."""

    def __init__(self, size=BOARD_SIZE, seed=None, table=None):
        self.size = size
        self.table = zobrist_init(size, seed) if table is None else table
        self.hash = 0

    def update(self, row, col, color):
        self.hash ^= self.table[row * self.size + col][_color_index(color)]

    def reset(self):
        self.hash = 0


def hash_board(board, table):
    """Compute the Zobrist hash of a Board from scratch (independent of move order)."""
    h = 0
    size = board.size
    for side, cells in board.steps_set.items():
        color_idx = _color_index(board.color_of(side))
        for row, col in cells:
            h ^= table[row * size + col][color_idx]
    return h


def lookup(ttable, key):
    return ttable.get(key)


def store(ttable, key, value):
    ttable[key] = value
