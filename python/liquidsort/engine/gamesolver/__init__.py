from liquidsort.engine.gamesolver.solver import MAX_MOVES, Solver

__all__ = ["MAX_MOVES", "Solver"]
