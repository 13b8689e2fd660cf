"""Game configuration and YAML loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from lightcycle.agents import StrategyConfig, UnknownModeError
from lightcycle.core import BoardConfig

logger = logging.getLogger(__name__)

BOARD_KEYS = ("rows", "cols", "start_a", "start_b")
STRATEGY_KEYS = ("mode", "depth_limit", "alpha_beta", "seed")


class ConfigError(ValueError):
    pass


@dataclass
class GameConfig:
    board: BoardConfig = field(default_factory=BoardConfig)
    strategy: StrategyConfig = field(default_factory=StrategyConfig)


def game_config_from_dict(data: Mapping[str, Any]) -> GameConfig:
    board_cfg: Dict[str, Any] = dict(data.get("board") or {})
    strategy_cfg: Dict[str, Any] = dict(data.get("strategy") or {})

    for key, value in data.items():
        if key in ("board", "strategy"):
            continue
        if key in BOARD_KEYS:
            board_cfg[key] = value
        elif key in STRATEGY_KEYS:
            strategy_cfg[key] = value
        else:
            raise ConfigError(f"Unknown configuration key {key!r}.")

    unknown = [key for key in board_cfg if key not in BOARD_KEYS]
    unknown += [key for key in strategy_cfg if key not in STRATEGY_KEYS]
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}.")

    for key in ("start_a", "start_b"):
        if key in board_cfg:
            board_cfg[key] = _as_position(key, board_cfg[key])

    try:
        board = BoardConfig(**board_cfg)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid board configuration: {exc}") from exc

    try:
        strategy = StrategyConfig(**strategy_cfg)
    except UnknownModeError:
        raise
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid strategy configuration: {exc}") from exc

    return GameConfig(board=board, strategy=strategy)


def load_game_config(path: Union[str, Path]) -> GameConfig:
    cfg_path = Path(path)
    try:
        data = yaml.safe_load(cfg_path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {cfg_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{cfg_path} must contain a mapping at the top level.")
    logger.info("Loaded game configuration from %s", cfg_path)
    return game_config_from_dict(data)


def _as_position(key: str, value: Any):
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigError(f"{key} must be a [row, col] pair, got {value!r}.")
    try:
        return int(value[0]), int(value[1])
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must hold integer coordinates, got {value!r}.") from exc
