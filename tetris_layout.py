"""Window geometry for the pygame view: board, side panel and banner strip"""
from dataclasses import dataclass
from tetris_config import CONFIG

ROWS, COLS = CONFIG["FIELD_ROWS"], CONFIG["FIELD_COLS"]

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    banner_h: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 200
    banner_h = 36

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = banner_h + margin + board_h + margin

    board_x = margin
    board_y = banner_h + margin
    panel_x = board_x + board_w + margin
    panel_y = board_y

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        banner_h=banner_h,
    )
