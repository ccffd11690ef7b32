from slidecore.models.board import EMPTY, Cell, Direction, GridState

__all__ = ["EMPTY", "Cell", "Direction", "GridState"]
