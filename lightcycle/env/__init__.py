from .gym_env import ACTIONS, LightCycleEnv

__all__ = ["ACTIONS", "LightCycleEnv"]
