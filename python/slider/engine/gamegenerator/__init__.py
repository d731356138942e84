from slider.engine.gamegenerator.generator import GameGenerator

__all__ = ["GameGenerator"]
