"""
Game engine: the phase machine that owns the field, the current and next
piece, score, level and the drop timer.

The active piece is always painted into the field. Every move removes it,
changes position or rotation, tests for collision, reverts if needed and
paints it back, so the field is the single source of truth.

Snapshot ``pause`` is a tri-state kept for the front-ends:
0 running, 1 paused, -1 game over. Internally ``phase`` and ``paused`` are
separate fields and the tri-state is computed in ``snapshot()``.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from tetris_board import Grid, new_grid, clear, collides, place, remove, erase_full_rows
from tetris_catalog import BrickCatalog
from tetris_config import CONFIG
from tetris_fsm import Action, Phase, dispatch
from tetris_highscore import read_highscore, write_highscore
from tetris_piece import Piece, BRICK_HEIGHT, BRICK_WIDTH
from tetris_scoring import reward, level_for_score, drop_timeout, speed_ms, MIN_LEVEL
from tetris_timer import GameTimer

log = logging.getLogger(__name__)


@dataclass
class GameInfo:
    field: Grid
    next: List[List[int]]
    score: int = 0
    high_score: int = 0
    level: int = MIN_LEVEL
    speed: int = 0
    pause: int = 0


class TetrisEngine:
    def __init__(self, catalog: BrickCatalog, timer: Optional[GameTimer] = None,
                 highscore_file=None):
        self.catalog = catalog
        self.timer = timer or GameTimer(drop_timeout(MIN_LEVEL))
        self.highscore_file = highscore_file or CONFIG["HIGHSCORE_FILE"]

        self.phase = Phase.READY
        self.paused = False
        self.field: Grid = new_grid()
        self.preview: List[List[int]] = [[0] * BRICK_WIDTH for _ in range(BRICK_HEIGHT)]
        self.current: Optional[Piece] = None
        self.next: Optional[Piece] = None

        self.score = 0
        self.high_score = 0
        self.level = MIN_LEVEL
        self.speed = speed_ms(self.level)
        self._saved_high_score: Optional[int] = None

    # ---------- facade ----------
    def submit_action(self, action: Action, hold: bool = False) -> bool:
        return dispatch(self, action, hold)

    def advance_tick(self) -> bool:
        return self.tick()

    def snapshot(self) -> GameInfo:
        if self.phase is Phase.GAMEOVER:
            pause = -1
        else:
            pause = 1 if self.paused else 0
        return GameInfo(
            field=self.field,
            next=[row[:] for row in self.preview],
            score=self.score,
            high_score=self.high_score,
            level=self.level,
            speed=self.speed,
            pause=pause,
        )

    def update_current_state(self) -> GameInfo:
        self.tick()
        return self.snapshot()

    def enable_custom_bricks(self) -> bool:
        """Extra bricks may only join before the first spawn."""
        if self.phase is not Phase.READY:
            return False
        return self.catalog.populate_custom()

    # ---------- lifecycle ----------
    def on_startup(self) -> None:
        self.high_score = read_highscore(self.highscore_file)
        self._saved_high_score = self.high_score
        log.info("high score loaded: %d", self.high_score)

    def on_shutdown(self) -> None:
        self._save_high_score()

    def _save_high_score(self) -> None:
        if self._saved_high_score is None or self.high_score == self._saved_high_score:
            return
        if write_highscore(self.highscore_file, self.high_score):
            self._saved_high_score = self.high_score

    def _set_phase(self, phase: Phase) -> None:
        if phase is not self.phase:
            log.debug("phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def start(self) -> None:
        if self.phase is Phase.READY:
            self.on_startup()
        if self.phase is Phase.GAMEOVER:
            clear(self.field)
            self.level = MIN_LEVEL
            self.score = 0
            self.paused = False
        self.spawn()

    def pause(self) -> None:
        if self.paused:
            self.paused = False
            self._set_phase(Phase.MOVING)
        else:
            self.paused = True
            self._set_phase(Phase.PAUSED)

    def terminate(self) -> None:
        self.on_shutdown()
        self.current = None
        self._set_phase(Phase.TERMINATED)

    # ---------- moves ----------
    def up(self, hold: bool = False) -> None:
        pass

    def left(self, hold: bool = False) -> None:
        self._shift(-1)

    def right(self, hold: bool = False) -> None:
        self._shift(1)

    def _shift(self, dx: int) -> None:
        piece = self.current
        if piece is None:
            return
        remove(self.field, piece)
        piece.x += dx
        if collides(self.field, piece):
            piece.x -= dx
        place(self.field, piece)

    def down(self, hold: bool = False) -> None:
        piece = self.current
        if piece is None:
            return
        remove(self.field, piece)
        if hold:
            while not collides(self.field, piece):
                piece.y += 1
            piece.y -= 1
            attached = True
        else:
            piece.y += 1
            attached = collides(self.field, piece)
            if attached:
                piece.y -= 1
        place(self.field, piece)
        if attached:
            self.current = None
            self._set_phase(Phase.ATTACH)

    def action(self, hold: bool = False) -> None:
        piece = self.current
        if piece is None:
            return
        remove(self.field, piece)
        piece.next_state()
        if collides(self.field, piece):
            piece.prev_state()
        place(self.field, piece)

    # ---------- per-frame update ----------
    def tick(self) -> bool:
        self.level = level_for_score(self.score)
        self.timer.timeout_sec = drop_timeout(self.level)
        self.speed = speed_ms(self.level)

        fired = self.timer.tick()
        if fired and self.phase is Phase.MOVING:
            self.down(False)
        elif self.phase is Phase.ATTACH:
            erased = erase_full_rows(self.field)
            self.score += reward(erased)
            if erased:
                log.debug("erased %d rows, score %d", erased, self.score)
            if self.score > self.high_score:
                log.info("new high score %d", self.score)
                self.high_score = self.score
                self._save_high_score()
            self.spawn()
        return fired

    def spawn(self) -> None:
        self._set_phase(Phase.SPAWN)
        if self.next is None:
            self.next = self.catalog.get_random()
        self.current = self.next
        self.next = self.catalog.get_random()
        self.preview = self.next.preview()

        piece = self.current
        piece.x, piece.y = len(self.field[0]) // 2, 0
        if collides(self.field, piece):
            self.current = None
            self._set_phase(Phase.GAMEOVER)
            log.info("game over, score %d", self.score)
        else:
            place(self.field, piece)
            self._set_phase(Phase.MOVING)
            log.debug("spawned %s", piece.brick.name)
