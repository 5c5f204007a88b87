from dataclasses import dataclass
from tetris_config import CONFIG, COLS, ROWS

@dataclass
class Dims:
    cell: int
    margin: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = int(CONFIG["MARGIN"])

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin
    total_h = margin + board_h + margin

    return Dims(
        cell=cell, margin=margin,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=margin, board_y=margin,
    )
