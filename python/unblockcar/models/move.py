"""Single-step vehicle moves."""

from __future__ import annotations

from dataclasses import dataclass

from unblockcar.models.board import Direction


@dataclass(frozen=True)
class Move:
    """Slide *vehicle* one cell in *direction*.

    ``row``/``col`` name the anchor: the vehicle cell next to the empty
    cell it slides into, not the vehicle's head.
    """

    vehicle: str
    direction: Direction
    row: int
    col: int

    def __str__(self) -> str:
        return f"Car {self.vehicle} {self.direction.value}"
