from slidecore.engine.gameplay.game import AnimationView, PuzzleGame, Snapshot
from slidecore.engine.gameplay.moves import Move, MoveEngine

__all__ = ["AnimationView", "Move", "MoveEngine", "PuzzleGame", "Snapshot"]
