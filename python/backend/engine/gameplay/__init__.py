from backend.engine.gameplay.game import GameMode, GamePlay, GameSummary

__all__ = ["GameMode", "GamePlay", "GameSummary"]
