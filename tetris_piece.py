"""Brick model: shapes, colour tags, circular rotation"""
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

BRICK_HEIGHT, BRICK_WIDTH = 4, 4

Mask = Tuple[Tuple[int, ...], ...]


class BrickColor(IntEnum):
    LIGHT_BLUE = 1
    DARK_BLUE = 2
    ORANGE = 3
    YELLOW = 4
    GREEN = 5
    RED = 6
    MAGENTA = 7


def shape(*rows: str) -> Mask:
    return tuple(tuple(1 if ch == "#" else 0 for ch in row) for row in rows)


@dataclass(frozen=True)
class Brick:
    name: str
    color: int
    states: Tuple[Mask, ...]

    @property
    def total_states(self) -> int:
        return len(self.states)


@dataclass
class Piece:
    """A brick in play: rotation index plus anchor on the field."""
    brick: Brick
    state: int = 0
    x: int = 0
    y: int = 0

    @property
    def color(self) -> int:
        return self.brick.color

    @property
    def total_states(self) -> int:
        return self.brick.total_states

    @property
    def mask(self) -> Mask:
        return self.brick.states[self.state]

    def next_state(self) -> None:
        self.state = self.state + 1 if self.state + 1 < self.total_states else 0

    def prev_state(self) -> None:
        self.state = self.total_states - 1 if self.state == 0 else self.state - 1

    def preview(self) -> List[List[int]]:
        return [[self.color if v else 0 for v in row] for row in self.mask]


DEFAULT_BRICKS = (
    Brick("I", BrickColor.LIGHT_BLUE, (
        shape("....", "####", "....", "...."),
        shape("..#.", "..#.", "..#.", "..#."),
    )),
    Brick("O", BrickColor.YELLOW, (
        shape("....", ".##.", ".##.", "...."),
    )),
    Brick("S", BrickColor.GREEN, (
        shape("....", "..##", ".##.", "...."),
        shape("..#.", "..##", "...#", "...."),
    )),
    Brick("Z", BrickColor.RED, (
        shape("....", ".##.", "..##", "...."),
        shape("...#", "..##", "..#.", "...."),
    )),
    Brick("L", BrickColor.ORANGE, (
        shape("....", ".###", ".#..", "...."),
        shape("..#.", "..#.", "..##", "...."),
        shape("...#", ".###", "....", "...."),
        shape(".##.", "..#.", "..#.", "...."),
    )),
    Brick("J", BrickColor.DARK_BLUE, (
        shape("....", ".###", "...#", "...."),
        shape("..##", "..#.", "..#.", "...."),
        shape(".#..", ".###", "....", "...."),
        shape("..#.", "..#.", ".##.", "...."),
    )),
    Brick("T", BrickColor.MAGENTA, (
        shape("....", ".###", "..#.", "...."),
        shape("..#.", "..##", "..#.", "...."),
        shape("..#.", ".###", "....", "...."),
        shape("..#.", ".##.", "..#.", "...."),
    )),
)

# Oversized extras, off unless CONFIG["CUSTOM_BRICKS"] is set
CUSTOM_BRICKS = (
    Brick("BLOCK", BrickColor.YELLOW, (
        shape("....", "####", "####", "####"),
        shape("....", ".###", ".###", ".###"),
        shape("....", ".##.", ".##.", ".##."),
        shape("....", "###.", "###.", "###."),
    )),
    Brick("CRAB", BrickColor.RED, (
        shape("....", "####", ".##.", "#..#"),
        shape("....", ".##.", "#..#", ".##."),
    )),
)
