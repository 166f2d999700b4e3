from backend.models.board import BOARD_SIZE, Board, Direction
from backend.models.outcome import GameSnapshot, GameStatus, MoveResult

__all__ = [
    "BOARD_SIZE",
    "Board",
    "Direction",
    "GameSnapshot",
    "GameStatus",
    "MoveResult",
]
