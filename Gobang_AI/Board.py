"""Board state tracker: per-side move stacks, occupancy sets, and the position fingerprint."""

BOARD_SIZE = 15

# Sides (opponent of side is -side)
AI = 1
HUMAN = -1

# Physical colors, black moves first
BLACK = -1
WHITE = 1


class Board:
    def __init__(self, size=BOARD_SIZE, zobrist=None, black_side=HUMAN):
        if black_side not in (AI, HUMAN):
            raise ValueError("black_side must be AI (1) or HUMAN (-1)")
        self.size = size
        self.zobrist = zobrist
        self.black_side = black_side
        # Ordered moves and membership sets, kept in lockstep
        self.steps = {AI: [], HUMAN: []}
        self.steps_set = {AI: set(), HUMAN: set()}
        self.history = []
        self.occupied = set()

    @property
    def move_count(self):
        return len(self.history)

    @property
    def last_move(self):
        return self.history[-1] if self.history else None

    @property
    def hash(self):
        return self.zobrist.hash if self.zobrist is not None else 0

    def color_of(self, side):
        return BLACK if side == self.black_side else WHITE

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and (row, col) not in self.occupied

    def is_full(self):
        return len(self.occupied) >= self.size * self.size

    def stones(self, side):
        return self.steps_set[side]

    def empty_cells(self):
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if (row, col) not in self.occupied
        ]

    def place(self, side, cell):
        """Place a stone for side; raise if out of bounds or occupied."""
        if side not in (AI, HUMAN):
            raise ValueError("side must be AI (1) or HUMAN (-1)")
        row, col = cell
        if not self.in_bounds(row, col):
            raise ValueError(f"move out of bounds: {cell}")
        if (row, col) in self.occupied:
            raise ValueError(f"cell already occupied: {cell}")
        self.steps[side].append((row, col))
        self.steps_set[side].add((row, col))
        self.history.append((row, col))
        self.occupied.add((row, col))
        if self.zobrist is not None:
            self.zobrist.update(row, col, self.color_of(side))

    def undo(self, side, cell):
        """Take back the most recent placement; placements must be undone in reverse order."""
        cell = tuple(cell)
        if not self.history or self.history[-1] != cell:
            raise ValueError(f"undo out of order: {cell} is not the last move")
        if not self.steps[side] or self.steps[side][-1] != cell:
            raise ValueError(f"undo out of order: {cell} was not played by side {side}")
        self.steps[side].pop()
        self.steps_set[side].discard(cell)
        self.history.pop()
        self.occupied.discard(cell)
        if self.zobrist is not None:
            self.zobrist.update(cell[0], cell[1], self.color_of(side))
