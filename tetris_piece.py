"""Piece model, shape catalog, offset rotation"""
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Tuple

from tetris_config import CONFIG

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Offsets = Tuple[Cell, Cell, Cell, Cell]

class Shape(Enum):
    I = "I"
    Z = "Z"
    L = "L"
    T = "T"
    O = "O"
    S = "S"
    J = "J"

OFFSETS: Dict[Shape, Offsets] = {
    Shape.I: ((0,0),(1,0),(2,0),(3,0)),
    Shape.Z: ((0,0),(1,0),(1,1),(2,1)),
    Shape.L: ((0,0),(1,0),(2,0),(2,1)),
    Shape.T: ((0,0),(1,0),(2,0),(1,1)),
    Shape.O: ((0,0),(0,1),(1,0),(1,1)),
    Shape.S: ((0,1),(1,1),(1,0),(2,0)),
    Shape.J: ((0,0),(0,1),(0,2),(1,2)),
}

# selection order for the randomizer, one entry per enum member
CATALOG: Tuple[Shape, ...] = tuple(Shape)

def rotate_offsets(offsets: Offsets) -> Offsets:
    """Quarter turn about the local origin: (x, y) -> (-y, x)."""
    return tuple((-oy, ox) for ox, oy in offsets)

@dataclass
class Piece:
    kind: Shape
    offsets: Offsets
    x: int
    y: int

    def cells(self) -> List[Cell]:
        return [(self.x+dx, self.y+dy) for dx, dy in self.offsets]

    def translate(self, dx: int, dy: int):
        self.x += dx; self.y += dy

    def rotate(self):
        # offsets may be shared with copies, never mutate in place
        self.offsets = rotate_offsets(self.offsets)

    def moved(self, dx: int, dy: int) -> "Piece":
        p = replace(self)
        p.translate(dx, dy)
        return p

    def rotated(self) -> "Piece":
        p = replace(self)
        p.rotate()
        return p

    @staticmethod
    def spawn(kind: Shape) -> "Piece":
        return Piece(kind, OFFSETS[kind], CONFIG["SPAWN_X"], CONFIG["SPAWN_Y"])

def spawn(rng) -> Piece:
    """Pick a shape uniformly from the catalog and place it at the spawn origin."""
    kind = CATALOG[rng.next_index()]
    logger.debug("spawning %s", kind.value)
    return Piece.spawn(kind)
