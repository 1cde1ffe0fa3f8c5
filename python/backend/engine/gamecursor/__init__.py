from backend.engine.gamecursor.cursor import move_cursor

__all__ = ["move_cursor"]
