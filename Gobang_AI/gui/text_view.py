"""Plain-text board renderer for terminal games."""

try:
    from Board import BLACK
except ImportError:
    from Gobang_AI.Board import BLACK


STONE_CHARS = {BLACK: "X", -BLACK: "O"}


def stone_colors(board):
    """Snapshot of the placed stones as {cell: color}."""
    colors = {}
    for side, cells in board.steps.items():
        for cell in cells:
            colors[cell] = board.color_of(side)
    return colors


def render_board(board, last_move=None):
    """Return the board as text; the last move is bracketed."""
    size = board.size
    colors = stone_colors(board)

    lines = ["    " + "".join(f"{col:3d}" for col in range(size))]
    for row in range(size):
        parts = []
        for col in range(size):
            ch = STONE_CHARS[colors[(row, col)]] if (row, col) in colors else "."
            parts.append(f"[{ch}]" if (row, col) == last_move else f" {ch} ")
        lines.append(f"{row:3d} " + "".join(parts))
    return "\n".join(lines)


class TextView:
    def __init__(self, out=print):
        self.out = out

    def render(self, board, last_move=None, banner=None):
        self.out(render_board(board, last_move))
        if banner:
            self.out(banner)
