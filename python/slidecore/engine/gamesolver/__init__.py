from slidecore.engine.gamesolver.solver import Solver

__all__ = ["Solver"]
