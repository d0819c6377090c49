"""Entry point for Gobang games. Load config, build the engine, start the GUI or text loop."""

try:
    from utils.cli import parse_args
    from utils.config import build_config, load_settings, resolve_project_path
    from utils.logger import log_event
    from Board import HUMAN, BOARD_SIZE
    from GobangEngine import GobangEngine
    from Gobanggame import Gobanggame
    from Player import HumanPlayer
    from ai import heuristic
    from gui.text_view import TextView
except ImportError:
    from Gobang_AI.utils.cli import parse_args
    from Gobang_AI.utils.config import build_config, load_settings, resolve_project_path
    from Gobang_AI.utils.logger import log_event
    from Gobang_AI.Board import HUMAN, BOARD_SIZE
    from Gobang_AI.GobangEngine import GobangEngine
    from Gobang_AI.Gobanggame import Gobanggame
    from Gobang_AI.Player import HumanPlayer
    from Gobang_AI.ai import heuristic
    from Gobang_AI.gui.text_view import TextView


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)
    config = build_config(args, settings)
    patterns_path = resolve_project_path(args.patterns)
    if not patterns_path.exists():
        log_event(f"No pattern table at {patterns_path}; using built-in shape scores", level="WARN")
    patterns = heuristic.load_patterns(patterns_path)

    log_event(f"Depth {config.depth}, computer plays {'black' if config.ai_black else 'white'}")

    def new_engine():
        return GobangEngine(config, patterns=patterns, logger=log_event)

    if args.gui:
        try:
            from gui.pygame_view import PygameView
        except ImportError:
            from Gobang_AI.gui.pygame_view import PygameView

        view = PygameView(board_size=BOARD_SIZE)
        try:
            view.run(new_engine)
        finally:
            view.close()
        return

    view = TextView()
    game = Gobanggame(
        engine=new_engine(),
        human=HumanPlayer(HUMAN),
        logger=log_event,
        renderer=view.render,
    )
    game.play()


if __name__ == "__main__":
    main()
