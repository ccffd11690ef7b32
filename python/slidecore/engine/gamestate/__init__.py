from slidecore.engine.gamestate.state import SessionStats, SolvedDetector, SolveStatus

__all__ = ["SessionStats", "SolvedDetector", "SolveStatus"]
