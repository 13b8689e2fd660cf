from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from lightcycle.agents import Policy, make_policy
from lightcycle.config import GameConfig
from lightcycle.core import (
    KEY_BINDINGS,
    Agent,
    Direction,
    GameResult,
    GameState,
    Position,
    check_move,
    initialize_game_state,
    step,
)

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    FINISHED = "finished"


@dataclass(frozen=True)
class TurnResult:
    continues: bool
    winner: Optional[Agent] = None
    human_move: Optional[Position] = None
    agent_move: Optional[Position] = None


class GameController:
    """Turn state machine: the human (agent A) moves, then the computer (agent B)."""

    def __init__(self, config: Optional[GameConfig] = None, policy: Optional[Policy] = None) -> None:
        self.config = config or GameConfig()
        self.phase = GamePhase.IDLE
        self.history: List[Tuple[Agent, Position]] = []
        self._policy = policy
        self._state: Optional[GameState] = None

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise ValueError("Game has not been started.")
        return self._state

    @property
    def policy(self) -> Optional[Policy]:
        return self._policy

    @property
    def winner(self) -> Optional[Agent]:
        if self._state is None:
            return None
        return self._state.result.winner

    def start(self) -> GameState:
        if self.phase != GamePhase.IDLE:
            raise ValueError(f"Cannot start a game from phase {self.phase.value}.")
        if self._policy is None:
            self._policy = make_policy(self.config.strategy)
        self._state = initialize_game_state(self.config.board)
        self.history = []
        self.phase = GamePhase.PLAYING
        logger.info(
            "Game started on %dx%d board against %s agent",
            self.config.board.rows,
            self.config.board.cols,
            self.config.strategy.mode.value,
        )
        return self._state

    def handle_key(self, key: str) -> Optional[TurnResult]:
        """Play a turn for a bound key; other keys are ignored."""
        direction = KEY_BINDINGS.get(key)
        if direction is None:
            return None
        return self.play_turn(direction)

    def play_turn(self, direction: Direction) -> TurnResult:
        if self.phase != GamePhase.PLAYING:
            raise ValueError(f"Cannot play a turn in phase {self.phase.value}.")
        state = self.state

        target = step(state.positions[Agent.A], direction)
        if not check_move(target, state.board):
            return self._finish(Agent.B, human_move=None, agent_move=None)
        self._confirm(Agent.A, target)

        reply = self._policy.select_move(
            state.positions[Agent.B], state.positions[Agent.A], state.board, agent=Agent.B
        )
        if reply is None:
            return self._finish(Agent.A, human_move=target, agent_move=None)
        self._confirm(Agent.B, reply)

        return TurnResult(continues=True, human_move=target, agent_move=reply)

    # ------------------------------------------------------------------
    def _confirm(self, agent: Agent, position: Position) -> None:
        state = self.state
        state.board.mark_occupied(position, agent)
        state.positions[agent] = position
        state.ply_count += 1
        self.history.append((agent, position))

    def _finish(
        self,
        winner: Agent,
        *,
        human_move: Optional[Position],
        agent_move: Optional[Position],
    ) -> TurnResult:
        self.state.result = GameResult.won_by(winner)
        self.phase = GamePhase.FINISHED
        logger.info("Game finished after %d plies: player %d wins", self.state.ply_count, int(winner))
        return TurnResult(continues=False, winner=winner, human_move=human_move, agent_move=agent_move)
