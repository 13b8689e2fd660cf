"""Turn-by-turn game control."""

from .controller import GameController, GamePhase, TurnResult

__all__ = ["GameController", "GamePhase", "TurnResult"]
