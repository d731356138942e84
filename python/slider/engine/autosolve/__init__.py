from slider.engine.autosolve.session import AutoSolver

__all__ = ["AutoSolver"]
