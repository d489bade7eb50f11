from backend.engine.gamesolver.solver import SearchLimits, SearchResult, Solver

__all__ = ["SearchLimits", "SearchResult", "Solver"]
