"""CLI options for search depth, colors, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gobang: five in a row against the computer")
    parser.add_argument("--depth", type=int, help="Search depth for the computer (1-4)")
    parser.add_argument("--ai-black", action="store_true", default=None, help="Computer plays black and moves first")
    parser.add_argument("--seed", type=int, help="Seed for the Zobrist table (reproducible hashing)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--patterns", default="config/patterns.yaml", help="Path to shape score YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for human)")
    return parser.parse_args(argv)
