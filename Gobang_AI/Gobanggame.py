"""Text-mode game loop: human at the terminal against the computer."""

try:
    from engine import referee
    from GobangEngine import AI_WON, HUMAN_WON, DRAW
except ImportError:
    from Gobang_AI.engine import referee
    from Gobang_AI.GobangEngine import AI_WON, HUMAN_WON, DRAW


OUTCOME_TEXT = {
    AI_WON: "AI WINS",
    HUMAN_WON: "HUMAN WINS",
    DRAW: "DRAW",
}


class Gobanggame:
    def __init__(self, engine, human, logger=print, renderer=None, max_invalid=None):
        self.engine = engine
        self.human = human
        self.logger = logger
        self.renderer = renderer
        self.max_invalid = max_invalid
        self.move_index = 0

    def play(self):
        """Run a single game. Returns the engine's final state."""
        engine = self.engine
        board = engine.board
        last_move = None

        if engine.config.ai_black and board.move_count == 0:
            last_move = engine.opening_move()
            self._log_move("AI", last_move)

        while not engine.is_game_over():
            if self.renderer:
                self.renderer(board, last_move, None)

            if engine.human_to_move():
                last_move = self._human_turn()
                self._log_move("Human", last_move)
            else:
                last_move = engine.compute_computer_move()
                self._log_move("AI", last_move)

        banner = f"{OUTCOME_TEXT[engine.state]} DEPTH {engine.config.depth}"
        self.logger(banner)
        if self.renderer:
            self.renderer(board, last_move, banner)
        return engine.state

    def _human_turn(self):
        invalid = 0
        while True:
            try:
                move = self.human.next_move(self.engine.board)
                referee.check_move(move, self.engine.board)
            except ValueError as exc:
                invalid += 1
                self.logger(f"Invalid move: {exc}")
                if self.max_invalid is not None and invalid >= self.max_invalid:
                    raise
                continue
            self.engine.record_human_move(move)
            return move

    def _log_move(self, who, move):
        self.move_index += 1
        self.logger(f"Move {self.move_index}: {who} {move}")
