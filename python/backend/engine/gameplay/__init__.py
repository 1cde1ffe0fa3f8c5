from backend.engine.gameplay.game import Frame, GamePlay, play

__all__ = ["Frame", "GamePlay", "play"]
