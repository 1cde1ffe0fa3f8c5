from backend.engine.gamerender.render import TITLE, render_board, render_frame

__all__ = ["TITLE", "render_board", "render_frame"]
