"""Shape table and pattern-based evaluation (sliding windows, de-duplication, combo bonus)."""

from pathlib import Path
import yaml

# Window alphabet: 0 empty, 1 own stone, 2 opponent stone, 3 off the board.
# Default shapes; can be overridden by loading config/patterns.yaml if desired.
DEFAULT_PATTERNS = [
    ("01100", 50),        # two
    ("00110", 50),
    ("11010", 200),
    ("00111", 500),       # three
    ("11100", 500),
    ("01110", 5000),      # open three
    ("010110", 5000),
    ("011010", 5000),
    ("11101", 5000),      # four
    ("11011", 5000),
    ("10111", 5000),
    ("11110", 5000),
    ("01111", 5000),
    ("011110", 50000),    # open four
    ("11111", 99999999),  # five
]

DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))
WINDOW_OFFSETS = range(-5, 1)
COMBO_THRESHOLD = 10
OPPONENT_WEIGHT_TENTHS = 1  # opponent counts for 0.1 of the mover


def load_patterns(path="config/patterns.yaml"):
    """Load shape scores from YAML; fallback to defaults on error/missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Gobang_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return DEFAULT_PATTERNS

    loaded = []
    for item in data.get("patterns", []):
        pat = item.get("pattern")
        score = item.get("score", 0)
        if not pat:
            continue
        if isinstance(pat, list):
            for p in pat:
                loaded.append((str(p), int(score)))
        else:
            loaded.append((str(pat), int(score)))
    return loaded or DEFAULT_PATTERNS


def build_table(patterns=None):
    """Collapse (pattern, score) pairs into a lookup keeping the best score per pattern."""
    table = {}
    for pat, score in patterns or DEFAULT_PATTERNS:
        if score > table.get(pat, 0):
            table[pat] = score
    return table


def window_score(window, table):
    """Best score for a 6-cell window: match on its 5-cell prefix or on all six cells."""
    return max(table.get(window[:5], 0), table.get(window, 0))


def _classify(board, cell, mine, theirs):
    if cell in theirs:
        return "2"
    if cell in mine:
        return "1"
    if not board.in_bounds(*cell):
        return "3"
    return "0"


def _score_direction(board, stone, direction, mine, theirs, table, scored):
    """
    Score the best window through stone along direction.
    scored holds (score, cells, direction) for windows already counted this pass.
    """
    for _, cells, prev_direction in scored:
        if prev_direction == direction and stone in cells:
            return 0

    row, col = stone
    dr, dc = direction
    best_score = 0
    best_cells = ()
    for offset in WINDOW_OFFSETS:
        line = [(row + (k + offset) * dr, col + (k + offset) * dc) for k in range(6)]
        window = "".join(_classify(board, cell, mine, theirs) for cell in line)
        score = window_score(window, table)
        if score > best_score:
            best_score = score
            best_cells = tuple(line[:5])

    if not best_cells:
        return 0

    bonus = 0
    if best_score > COMBO_THRESHOLD:
        cells = set(best_cells)
        for prev_score, prev_cells, _ in scored:
            if prev_score > COMBO_THRESHOLD and not cells.isdisjoint(prev_cells):
                bonus += prev_score + best_score

    scored.append((best_score, best_cells, direction))
    return best_score + bonus


def score_side(board, side, patterns=None):
    """Raw shape score for side's stones, in play order, over the four line directions."""
    table = build_table(patterns)
    mine = board.stones(side)
    theirs = board.stones(-side)
    scored = []
    total = 0
    for stone in board.steps[side]:
        for direction in DIRECTIONS:
            total += _score_direction(board, stone, direction, mine, theirs, table, scored)
    return total


def _truncate_tenths(value_tenths):
    """Divide by ten, truncating toward zero."""
    if value_tenths >= 0:
        return value_tenths // 10
    return -((-value_tenths) // 10)


def evaluate(board, side, patterns=None):
    """
    Net value of the position for side: own score minus a tenth of the opponent's.
    Positive favors side.
    """
    mine = score_side(board, side, patterns)
    theirs = score_side(board, -side, patterns)
    return _truncate_tenths(10 * mine - OPPONENT_WEIGHT_TENTHS * theirs)
