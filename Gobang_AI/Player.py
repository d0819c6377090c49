"""Player interface for the human side of a text game."""


class Player:
    def __init__(self, side):
        self.side = side

    def next_move(self, board):
        """Return (row, col) for next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, side, prompt="Enter move as 'row col' (0-indexed): ", reader=input):
        super().__init__(side)
        self.prompt = prompt
        self.reader = reader

    def next_move(self, board):
        raw = self.reader(self.prompt).strip()
        try:
            row_str, col_str = raw.split()
            return int(row_str), int(col_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc
