"""Pygame-based board renderer and interactive game loop."""

try:
    from Board import BLACK
    from GobangEngine import AI_WON, HUMAN_WON, DRAW
    from engine import referee
    from utils.worker import SearchWorker
    from gui.text_view import stone_colors
except ImportError:
    from Gobang_AI.Board import BLACK
    from Gobang_AI.GobangEngine import AI_WON, HUMAN_WON, DRAW
    from Gobang_AI.engine import referee
    from Gobang_AI.utils.worker import SearchWorker
    from Gobang_AI.gui.text_view import stone_colors


RESULT_TEXT = {
    AI_WON: "AI WINS DEPTH {depth}",
    HUMAN_WON: "HUMAN WINS DEPTH {depth}",
    DRAW: "DRAW DEPTH {depth}",
}


class PygameView:
    # --- Constants ---
    COLOR_WOOD = (239, 228, 176)
    COLOR_GRID = (0, 0, 0)
    COLOR_BLACK = (0, 0, 0)
    COLOR_WHITE = (255, 255, 255)
    COLOR_RED = (200, 0, 0)

    FPS = 30

    def __init__(self, board_size, window_size=640):
        import pygame

        self.board_size = board_size
        self.window_size = window_size
        self._pygame = pygame

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size))
        pygame.display.set_caption("Gobang")
        self.clock = pygame.time.Clock()

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_small = pygame.font.Font(None, 24)

        # One empty grid step of margin on every side
        self.tile_size = window_size / (board_size + 1)
        self.stone_radius = self.tile_size / 3

    def _cell_center(self, row, col):
        return (col + 1) * self.tile_size, (row + 1) * self.tile_size

    def _draw_grid(self):
        pygame = self._pygame
        self.screen.fill(self.COLOR_WOOD)
        start = self.tile_size
        end = self.tile_size * self.board_size
        for i in range(self.board_size):
            offset = (i + 1) * self.tile_size
            pygame.draw.line(self.screen, self.COLOR_GRID, (offset, start), (offset, end), 1)
            pygame.draw.line(self.screen, self.COLOR_GRID, (start, offset), (end, offset), 1)

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_stones(self, stones):
        pygame = self._pygame
        for (row, col), color in stones.items():
            fill = self.COLOR_BLACK if color == BLACK else self.COLOR_WHITE
            center = self._cell_center(row, col)
            pygame.draw.circle(self.screen, fill, center, self.stone_radius)
            if fill == self.COLOR_WHITE:
                pygame.draw.circle(self.screen, self.COLOR_BLACK, center, self.stone_radius, 1)

    def _draw_last_move_marker(self, last_move):
        if not last_move:
            return
        center = self._cell_center(*last_move)
        self._pygame.draw.circle(self.screen, self.COLOR_RED, center, self.stone_radius, 2)

    def _draw_overlay(self, alpha, lines):
        pygame = self._pygame
        shade = pygame.Surface((self.window_size, self.window_size), pygame.SRCALPHA)
        shade.fill((0, 0, 0, alpha))
        self.screen.blit(shade, (0, 0))
        for i, text in enumerate(lines):
            y = self.window_size / 2 + i * self.window_size / 4
            self._draw_text(text, self.font_large, self.COLOR_RED, (self.window_size / 2, y))

    def render(self, stones, last_move=None, banner=None, thinking=False):
        """stones is a {cell: color} snapshot; the live board may be mid-search."""
        self._draw_grid()
        self._draw_stones(stones)
        self._draw_last_move_marker(last_move)

        if thinking:
            self._draw_overlay(50, ["AI Thinking"])
        elif banner:
            self._draw_overlay(150, [banner, "Click anywhere to continue"])

        fps = self.clock.get_fps()
        self._draw_text(f"FPS: {fps:.2f}", self.font_small, self.COLOR_GRID, (self.window_size / 2, 10))
        self._pygame.display.flip()

    def _get_coords_from_mouse(self, pos):
        mx, my = pos
        col = int(round(mx / self.tile_size)) - 1
        row = int(round(my / self.tile_size)) - 1
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return row, col
        return None

    def run(self, new_engine):
        """
        Play games until the window is closed. new_engine() builds a fresh
        GobangEngine for each game; searches run on a SearchWorker so the
        window keeps repainting while the computer thinks.
        """
        pygame = self._pygame
        worker = SearchWorker()
        engine, last_move = self._start_game(new_engine)
        stones = stone_colors(engine.board)
        banner = None

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type != pygame.MOUSEBUTTONDOWN or worker.busy:
                    continue
                if banner is not None:
                    engine, last_move = self._start_game(new_engine)
                    stones = stone_colors(engine.board)
                    banner = None
                    continue
                coords = self._get_coords_from_mouse(event.pos)
                if coords is None or not engine.human_to_move():
                    continue
                try:
                    referee.check_move(coords, engine.board)
                except ValueError:
                    continue
                engine.record_human_move(coords)
                last_move = coords
                stones = stone_colors(engine.board)
                if engine.is_game_over():
                    banner = RESULT_TEXT[engine.state].format(depth=engine.config.depth)
                else:
                    worker.start(engine.compute_computer_move)

            if worker.busy:
                move = worker.poll()
                if move is not None:
                    last_move = move
                    stones = stone_colors(engine.board)
                    if engine.is_game_over():
                        banner = RESULT_TEXT[engine.state].format(depth=engine.config.depth)

            self.render(stones, last_move, banner=banner, thinking=worker.busy)
            self.clock.tick(self.FPS)

    def _start_game(self, new_engine):
        engine = new_engine()
        last_move = engine.opening_move() if engine.config.ai_black else None
        return engine, last_move

    def close(self):
        self._pygame.quit()
