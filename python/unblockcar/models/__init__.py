from unblockcar.models.board import Board, Direction, Orientation, Vehicle, decode, encode
from unblockcar.models.config import SolverConfig
from unblockcar.models.errors import InvalidBoard, InvalidMove, SearchAborted, UnblockCarError
from unblockcar.models.move import Move

__all__ = [
    "Board",
    "Direction",
    "InvalidBoard",
    "InvalidMove",
    "Move",
    "Orientation",
    "SearchAborted",
    "SolverConfig",
    "UnblockCarError",
    "Vehicle",
    "decode",
    "encode",
]
