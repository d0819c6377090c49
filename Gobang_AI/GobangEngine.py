"""Computer opponent: owns the board, hasher, and evaluation cache for one game."""

try:
    from Board import Board, AI, HUMAN, BOARD_SIZE
    from ai import heuristic, search_negamax, transposition
    from engine import gobang_rules
    from utils.config import EngineConfig
    from utils.logger import log_event
except ImportError:
    from Gobang_AI.Board import Board, AI, HUMAN, BOARD_SIZE
    from Gobang_AI.ai import heuristic, search_negamax, transposition
    from Gobang_AI.engine import gobang_rules
    from Gobang_AI.utils.config import EngineConfig
    from Gobang_AI.utils.logger import log_event


ONGOING = "ongoing"
AI_WON = "ai_won"
HUMAN_WON = "human_won"
DRAW = "draw"


class GobangEngine:
    """
    Single-caller engine: one search at a time against its board and cache.
    Callers running the search on another thread must not touch the engine
    until that search has returned.
    """

    def __init__(self, config=None, patterns=None, logger=log_event):
        self.config = config or EngineConfig()
        self.patterns = patterns or heuristic.DEFAULT_PATTERNS
        self.logger = logger
        self.zobrist = transposition.Zobrist(BOARD_SIZE, seed=self.config.seed)
        self.board = Board(
            size=BOARD_SIZE,
            zobrist=self.zobrist,
            black_side=AI if self.config.ai_black else HUMAN,
        )
        # Evaluation cache reused for the whole game: (fingerprint, color) -> score
        self.cache = {}
        self.state = ONGOING

    def human_to_move(self):
        """Black moves on even plies."""
        black_to_move = self.board.move_count % 2 == 0
        return black_to_move != self.config.ai_black

    def record_human_move(self, cell):
        self.board.place(HUMAN, tuple(cell))

    def record_computer_move(self, cell):
        self.board.place(AI, tuple(cell))

    def opening_move(self):
        """Seed the centre stone for the computer (search needs a stone to grow from)."""
        center = (self.board.size // 2, self.board.size // 2)
        self.record_computer_move(center)
        return center

    def compute_computer_move(self):
        """Search for the computer's move, commit it, and return it."""
        move = search_negamax.choose_move(
            self.board,
            self.config.depth,
            patterns=self.patterns,
            cache=self.cache,
            logger=self.logger,
        )
        self.record_computer_move(move)
        return move

    def is_game_over(self):
        if gobang_rules.has_five_in_a_row(self.board.stones(AI), self.board.size):
            self.state = AI_WON
            return True
        if gobang_rules.has_five_in_a_row(self.board.stones(HUMAN), self.board.size):
            self.state = HUMAN_WON
            return True
        if self.board.is_full():
            self.state = DRAW
            return True
        return False
