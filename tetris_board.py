"""Grid model: free-cell test, placement, line clear"""
import logging
from typing import Iterable, Iterator, List, Tuple

from tetris_config import COLS, ROWS

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

class Grid:
    def __init__(self, width: int=COLS, height: int=ROWS):
        self.width = width
        self.height = height
        self._rows: List[List[bool]] = [[False]*width for _ in range(height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_free(self, x: int, y: int) -> bool:
        """True if a piece cell may occupy (x, y). Rows above the top are always free."""
        if x < 0 or x >= self.width or y >= self.height:
            return False
        return y < 0 or not self._rows[y][x]

    def fits(self, cells: Iterable[Cell]) -> bool:
        return all(self.is_free(x, y) for x, y in cells)

    def is_filled(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._rows[y][x]

    def place(self, cells: Iterable[Cell]):
        """Fill every in-bounds cell; anything outside the grid is dropped."""
        for x, y in cells:
            if self.in_bounds(x, y):
                self._rows[y][x] = True

    def clear_full_lines(self) -> int:
        """Remove full rows bottom-up and return how many were cleared.

        After a removal the same row index is checked again, since the row
        above has just shifted into it.
        """
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if all(self._rows[y]):
                del self._rows[y]
                self._rows.insert(0, [False]*self.width)
                cleared += 1
            else:
                y -= 1
        if cleared:
            logger.debug("cleared %d row(s)", cleared)
        return cleared

    def rows(self) -> Tuple[Tuple[bool, ...], ...]:
        return tuple(tuple(r) for r in self._rows)

    def filled_cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                if self.is_filled(x, y): yield (x, y)
