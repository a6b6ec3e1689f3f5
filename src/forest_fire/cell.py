"""Cell states of the forest grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

# Number of ticks a burnt-out cell stays visible before it turns vacant
BURN_DECAY_FRAMES = 15


class CellKind(IntEnum):
    """Possible kinds of a forest cell."""
    Vacant = 0
    Tree = 1
    Burning = 2
    Decaying = 3


@dataclass(frozen=True)
class CellState:
    """Tagged state of a single cell.

    ``decay`` is the number of remaining decay frames and is non-zero only
    for ``CellKind.Decaying`` cells.
    """

    kind: CellKind
    decay: int = 0

    def __post_init__(self) -> None:
        if self.kind == CellKind.Decaying:
            if not 1 <= self.decay <= BURN_DECAY_FRAMES:
                raise ValueError(f"Decaying cell needs 1..{BURN_DECAY_FRAMES} frames, got {self.decay}")
        elif self.decay != 0:
            raise ValueError(f"{self.kind.name} cell cannot carry a decay countdown")

    @classmethod
    def decaying(cls, frames: int = BURN_DECAY_FRAMES) -> "CellState":
        return cls(CellKind.Decaying, frames)

    def is_growable(self) -> bool:
        """Whether a tree may grow here (vacant or still fading after a fire)."""
        return self.kind in (CellKind.Vacant, CellKind.Decaying)

    def __str__(self) -> str:
        if self.kind == CellKind.Decaying:
            return f"Decaying({self.decay})"
        return self.kind.name


VACANT = CellState(CellKind.Vacant)
TREE = CellState(CellKind.Tree)
BURNING = CellState(CellKind.Burning)
