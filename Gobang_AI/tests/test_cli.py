from Gobang_AI.utils.cli import parse_args
from Gobang_AI.utils.config import EngineConfig, build_config


def test_defaults_leave_settings_in_charge():
    args = parse_args([])
    assert args.depth is None
    assert args.ai_black is None
    assert args.gui is False
    cfg = build_config(args, {"search_depth": 4, "ai_black": True})
    assert cfg == EngineConfig(depth=4, ai_black=True)


def test_flags_override_settings():
    args = parse_args(["--depth", "3", "--ai-black", "--seed", "11"])
    cfg = build_config(args, {"search_depth": 1, "ai_black": False, "zobrist_seed": 2})
    assert cfg == EngineConfig(depth=3, ai_black=True, seed=11)
