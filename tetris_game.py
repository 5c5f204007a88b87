"""
Game engine: gravity, movement, rotation, lock, line clear and respawn.

Every operation is total. A rejected move leaves the state untouched and
returns False; nothing here raises for bad input or ends the game. All calls
must come from one thread (the pygame event loop serialises ticks and keys).
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from tetris_board import Grid
from tetris_piece import Cell, Piece, spawn
from tetris_rng import ShapeRandom

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Snapshot:
    """Render-ready view of the engine: grid occupancy plus the active cells."""
    grid: Tuple[Tuple[bool, ...], ...]
    piece: Tuple[Cell, ...]

class Game:
    def __init__(self, rng: Optional[ShapeRandom]=None, grid: Optional[Grid]=None):
        self.rng = rng if rng is not None else ShapeRandom()
        self.grid = grid if grid is not None else Grid()
        self.piece: Piece = spawn(self.rng)

    def _try(self, candidate: Piece) -> bool:
        if not self.grid.fits(candidate.cells()):
            return False
        self.piece = candidate
        return True

    def _lock(self):
        cells = self.piece.cells()
        self.grid.place(cells)
        if any(y < 0 for _, y in cells):
            logger.debug("%s locked above the visible grid at %s", self.piece.kind.value, cells)
        else:
            logger.debug("%s locked at %s", self.piece.kind.value, cells)
        c = self.grid.clear_full_lines()
        if c:
            logger.info("cleared %d line(s)", c)
        self.piece = spawn(self.rng)

    def tick(self) -> bool:
        """Drop the piece one row; lock, clear and respawn when it cannot fall.

        Returns True if the piece moved, False if it was locked.
        """
        if self._try(self.piece.moved(0, 1)):
            return True
        self._lock()
        return False

    def soft_drop(self) -> bool:
        return self.tick()

    def move_left(self) -> bool:
        return self._try(self.piece.moved(-1, 0))

    def move_right(self) -> bool:
        return self._try(self.piece.moved(1, 0))

    def rotate(self) -> bool:
        # whole-piece accept or reject, no kicks
        return self._try(self.piece.rotated())

    def snapshot(self) -> Snapshot:
        return Snapshot(self.grid.rows(), tuple(self.piece.cells()))
