"""Brick catalog: registered shapes handed out as fresh pieces"""
import logging
from typing import List, Optional

from tetris_piece import Brick, Piece, DEFAULT_BRICKS, CUSTOM_BRICKS
from tetris_rng import LCGRandom

log = logging.getLogger(__name__)


class BrickCatalog:
    """
    Owns the brick templates. Every fetch copies a template into a new
    ``Piece`` at rotation 0 and position (0, 0), so pieces handed out never
    share state with each other or with the catalog.

    ``get_random`` never returns the same index twice in a row while more
    than one brick is registered.
    """

    def __init__(self, rng: Optional[LCGRandom] = None):
        self.items: List[Brick] = []
        self.rng = rng or LCGRandom()
        self.last_index: Optional[int] = None
        self.custom_populated = False

    def __len__(self) -> int:
        return len(self.items)

    def register(self, brick: Brick) -> None:
        self.items.append(brick)

    def get(self, index: int) -> Piece:
        return Piece(self.items[index])

    def get_random(self) -> Piece:
        count = len(self.items)
        if count == 0:
            raise LookupError("brick catalog is empty")
        while True:
            index = self.rng.randrange(count)
            if index != self.last_index or count == 1:
                break
        self.last_index = index
        return self.get(index)

    def populate_defaults(self) -> None:
        for brick in DEFAULT_BRICKS:
            self.register(brick)

    def populate_custom(self) -> bool:
        if self.custom_populated:
            return False
        for brick in CUSTOM_BRICKS:
            self.register(brick)
        self.custom_populated = True
        log.info("custom bricks added, catalog size %d", len(self.items))
        return True

    @classmethod
    def standard(cls, seed: Optional[int] = None, custom: bool = False) -> "BrickCatalog":
        catalog = cls(LCGRandom(seed))
        catalog.populate_defaults()
        if custom:
            catalog.populate_custom()
        return catalog
