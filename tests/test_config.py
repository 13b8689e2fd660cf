from pathlib import Path

import pytest

from lightcycle.agents import AgentMode, UnknownModeError
from lightcycle.config import ConfigError, game_config_from_dict, load_game_config

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_default_config_file_matches_reference() -> None:
    config = load_game_config(REPO_ROOT / "configs" / "default.yaml")
    assert (config.board.rows, config.board.cols) == (30, 30)
    assert config.board.start_a == (0, 0)
    assert config.board.start_b == (13, 4)
    assert config.strategy.mode == AgentMode.MINIMAX
    assert config.strategy.depth_limit == 4


def test_flat_keys_are_accepted(tmp_path) -> None:
    path = tmp_path / "game.yaml"
    path.write_text("rows: 8\ncols: 9\nstart_b: [7, 8]\nmode: Random\nseed: 3\n")
    config = load_game_config(path)
    assert config.board.rows == 8
    assert config.board.cols == 9
    assert config.board.start_b == (7, 8)
    assert config.strategy.mode == AgentMode.RANDOM
    assert config.strategy.seed == 3


def test_empty_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")
    config = load_game_config(path)
    assert config.board.rows == 30
    assert config.strategy.mode == AgentMode.MINIMAX


def test_unknown_key_is_rejected() -> None:
    with pytest.raises(ConfigError):
        game_config_from_dict({"players": 3})
    with pytest.raises(ConfigError):
        game_config_from_dict({"board": {"layers": 2}})


def test_unknown_mode_propagates() -> None:
    with pytest.raises(UnknownModeError):
        game_config_from_dict({"strategy": {"mode": "telepathy"}})


def test_invalid_board_is_a_config_error() -> None:
    with pytest.raises(ConfigError):
        game_config_from_dict({"rows": 5, "cols": 5, "start_b": [9, 9]})
    with pytest.raises(ConfigError):
        game_config_from_dict({"start_a": 4})


def test_non_mapping_yaml_is_rejected(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_game_config(path)


def test_non_integer_start_is_a_config_error() -> None:
    with pytest.raises(ConfigError):
        game_config_from_dict({"start_a": ["x", 1]})
    with pytest.raises(ConfigError):
        game_config_from_dict({"board": {"start_b": [None, 2]}})


def test_negative_depth_is_rejected_on_load() -> None:
    with pytest.raises(ConfigError):
        game_config_from_dict({"depth_limit": -1})
    with pytest.raises(ConfigError):
        game_config_from_dict({"strategy": {"mode": "minimax", "depth_limit": -3}})
