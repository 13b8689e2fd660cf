from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from lightcycle.agents import Policy, RandomPolicy
from lightcycle.core import (
    Agent,
    BoardConfig,
    Direction,
    GameResult,
    check_move,
    initialize_game_state,
    step,
)

ACTIONS = tuple(Direction)


class LightCycleEnv(gym.Env):
    """Single-agent view of the arena: the learner drives agent A, ``opponent`` drives agent B."""

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        board_config: Optional[BoardConfig] = None,
        opponent: Optional[Policy] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._board_config = board_config or BoardConfig()
        self._opponent = opponent or RandomPolicy()
        self.render_mode = render_mode

        rows, cols = self._board_config.rows, self._board_config.cols
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=2, shape=(rows, cols), dtype=np.int8),
                "positions": spaces.Box(low=0, high=max(rows, cols) - 1, shape=(2, 2), dtype=np.int64),
            }
        )
        self.action_space = spaces.Discrete(len(ACTIONS))

        self._state = initialize_game_state(self._board_config)

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        if seed is not None:
            self._opponent = self._opponent.spawn(seed)
        self._state = initialize_game_state(self._board_config)
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if self._state.is_terminal:
            raise ValueError("Cannot step a finished episode; call reset().")

        state = self._state
        target = step(state.positions[Agent.A], ACTIONS[int(action_index)])
        if not check_move(target, state.board):
            state.result = GameResult.AGENT_B_WIN
        else:
            self._advance(Agent.A, target)
            reply = self._opponent.select_move(
                state.positions[Agent.B], state.positions[Agent.A], state.board, agent=Agent.B
            )
            if reply is None:
                state.result = GameResult.AGENT_A_WIN
            else:
                self._advance(Agent.B, reply)

        reward = self._compute_reward(state.result)
        terminated = state.is_terminal
        truncated = False
        return self._build_observation(), reward, terminated, truncated, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        position = self._state.positions[Agent.A]
        for index, direction in enumerate(ACTIONS):
            if check_move(step(position, direction), self._state.board):
                mask[index] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return repr(self._state.board)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _advance(self, agent: Agent, position) -> None:
        self._state.board.mark_occupied(position, agent)
        self._state.positions[agent] = position
        self._state.ply_count += 1

    def _build_observation(self) -> Dict[str, np.ndarray]:
        positions = np.array(
            [self._state.positions[Agent.A], self._state.positions[Agent.B]],
            dtype=np.int64,
        )
        return {"board": self._state.board.grid.copy(), "positions": positions}

    def _build_info(self) -> Dict[str, np.ndarray]:
        return {"legal_action_mask": self.legal_action_mask()}

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.AGENT_A_WIN:
            return 1.0
        if result == GameResult.AGENT_B_WIN:
            return -1.0
        return 0.0
