"""
Rendering helpers for the Tetris window.

The static background (frame + grid lines) and one sprite per cell style are
pre-rendered and blitted, so a redraw is a handful of blits. Locked grid cells
and the falling piece use different colours.
"""
from __future__ import annotations
import pygame
from typing import Tuple
from tetris_layout import Dims
from tetris_game import Snapshot

BG: Tuple[int,int,int] = (10,13,34)
GRID_LINE: Tuple[int,int,int] = (40,50,90)
LOCKED: Tuple[int,int,int] = (0,0,255)
ACTIVE: Tuple[int,int,int] = (255,0,0)

class RenderAssets:
    """Holds the pre-rendered assets for one cell size."""
    def __init__(self, dims: Dims):
        self.dims = dims
        self._make_static()
        self._make_cells()

    # ---------- Static background (frame + grid) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        cols, rows = d.board_w // d.cell, d.board_h // d.cell
        for x in range(cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID_LINE, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID_LINE, (d.board_x, Y), (d.board_x + d.board_w, Y))

    # ---------- Cell sprites ----------
    def _make_cells(self):
        c = self.dims.cell
        self.locked_surf = pygame.Surface((c-2, c-2))
        self.locked_surf.fill(LOCKED)
        self.active_surf = pygame.Surface((c-2, c-2))
        self.active_surf.fill(ACTIVE)

    def cell_pos(self, bx: int, by: int) -> Tuple[int,int]:
        return (self.dims.board_x + bx*self.dims.cell + 1,
                self.dims.board_y + by*self.dims.cell + 1)

    def draw(self, screen: pygame.Surface, snap: Snapshot):
        """Paint the grid and the active piece; cells above the top row are skipped."""
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(snap.grid):
            for x, v in enumerate(row):
                if v: screen.blit(self.locked_surf, self.cell_pos(x, y))
        for x, y in snap.piece:
            if y >= 0:
                screen.blit(self.active_surf, self.cell_pos(x, y))
