from backend.models.board import Board, Direction, Move, MoveKind
from backend.models.tile import Tile

__all__ = ["Board", "Direction", "Move", "MoveKind", "Tile"]
