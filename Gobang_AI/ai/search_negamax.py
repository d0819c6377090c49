"""Depth-limited negamax with alpha-beta pruning over the neighbour-restricted move set."""

from . import heuristic
from . import move_selector
from . import transposition

try:
    from Board import AI
    from engine import gobang_rules
except ImportError:
    from Gobang_AI.Board import AI
    from Gobang_AI.engine import gobang_rules


INF = 10 ** 18


class NegamaxSearcher:
    """Encapsulates the state and counters for one computer decision."""

    def __init__(self, board, depth, patterns=None, cache=None, logger=None):
        if depth < 1:
            raise ValueError("search depth must be at least 1")
        self.board = board
        self.depth = depth
        self.patterns = patterns or heuristic.DEFAULT_PATTERNS
        self.cache = {} if cache is None else cache
        self.logger = logger

        # Internal state
        self.best_move = None
        self.search_count = 0
        self.cut_count = 0
        self.cache_hits = 0

    def choose_move(self):
        """
        Search from the computer's point of view and return (best_move, score).
        The board is left exactly as it was found.
        """
        if not self.board.history:
            raise ValueError("Search needs at least one stone on the board; seed an opening move first")

        self.best_move = None
        self.search_count = 0
        self.cut_count = 0
        self.cache_hits = 0

        score = self._negamax(AI, self.depth, -INF, INF)

        if self.logger is not None:
            self.logger(
                f"search count: {self.search_count}; cut count: {self.cut_count}; cache hit: {self.cache_hits}"
            )
        if self.best_move is None:
            raise ValueError("No move found; the game is already decided or the board is full")
        return self.best_move, score

    def _negamax(self, side, depth, alpha, beta):
        board = self.board
        if (
            depth == 0
            or gobang_rules.has_five_in_a_row(board.stones(side), board.size)
            or gobang_rules.has_five_in_a_row(board.stones(-side), board.size)
        ):
            return self._evaluate(side)

        for move in move_selector.generate_candidates(board):
            self.search_count += 1
            with gobang_rules.simulate(board, side, move):
                value = -self._negamax(-side, depth - 1, -beta, -alpha)

            if value > alpha:
                if depth == self.depth:
                    self.best_move = move
                if value >= beta:
                    self.cut_count += 1
                    return beta
                alpha = value

        return alpha

    def _evaluate(self, side):
        if self.board.zobrist is None:
            return heuristic.evaluate(self.board, side, patterns=self.patterns)
        key = (self.board.hash, self.board.color_of(side))
        cached = transposition.lookup(self.cache, key)
        if cached is not None:
            self.cache_hits += 1
            return cached
        score = heuristic.evaluate(self.board, side, patterns=self.patterns)
        transposition.store(self.cache, key, score)
        return score


def choose_move(board, depth, patterns=None, cache=None, logger=None):
    """
    Public function to start a search. Instantiates and uses NegamaxSearcher.
    Returns the chosen cell without placing it.
    """
    searcher = NegamaxSearcher(board, depth, patterns=patterns, cache=cache, logger=logger)
    move, _ = searcher.choose_move()
    return move
