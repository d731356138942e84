from slider.engine.gamestate.state import GameState

__all__ = ["GameState"]
