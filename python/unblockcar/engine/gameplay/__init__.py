from unblockcar.engine.gameplay.game import GamePlay
from unblockcar.engine.gameplay.moves import apply_move, find_moves

__all__ = ["GamePlay", "apply_move", "find_moves"]
