"""Agent-vs-agent evaluation helpers."""

from .match import EvaluationResult, evaluate_policies, play_match

__all__ = ["EvaluationResult", "evaluate_policies", "play_match"]
