from backend.models.board import Board, Direction
from backend.models.layout import Layout, parse_dimension

__all__ = ["Board", "Direction", "Layout", "parse_dimension"]
